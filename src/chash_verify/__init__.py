"""chash verify - fail-closed content hash inspection."""
from .logic import verify_contenthash

__all__ = ["verify_contenthash"]
