"""Rich UI components for cmdshell."""
from .renderer import RichRenderer

__all__ = ['RichRenderer']
