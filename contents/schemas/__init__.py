from .content import ContentEntrySchema

# Define the public API of this module
__all__ = [
    "ContentEntrySchema",
]
