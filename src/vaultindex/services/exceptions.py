"""Custom exceptions for Vault Index services."""


class DocumentStoreError(Exception):
    """Raised when the document store cannot create or overwrite a document.

    Attributes:
        path: Path to the document that failed
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str = "Document store operation failed"):
        """Initialize DocumentStoreError.

        Args:
            path: Path to the document that failed
            message: Human-readable error message
        """
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")
