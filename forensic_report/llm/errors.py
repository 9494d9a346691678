class CompletionError(Exception):
    """Raised when a chat-completion provider cannot produce text."""
    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)
