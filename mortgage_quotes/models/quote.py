from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..configuration.lending_limits import DEFAULT_CTA_LINK, DEFAULT_CTA_TEXT, PLACEHOLDER


class Quote(BaseModel):
    """Canonical mortgage product record, rebuilt on every retrieval cycle."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = PLACEHOLDER
    interest_rate_percent: Optional[float] = None
    rate_type: str = PLACEHOLDER
    rate_period: str = PLACEHOLDER
    follow_on_rate: str = PLACEHOLDER
    aprc_percent: Optional[float] = None
    product_fee: str = PLACEHOLDER
    max_loan_to_value_percent: Optional[float] = Field(
        default=None, description="LTV ceiling; None means unrestricted"
    )
    early_repayment_charge: str = PLACEHOLDER
    cta_text: str = DEFAULT_CTA_TEXT
    cta_link: str = DEFAULT_CTA_LINK
    features: List[str] = Field(default_factory=list)
