from .calculator import router as calculator_router

__all__ = ["calculator_router"]
