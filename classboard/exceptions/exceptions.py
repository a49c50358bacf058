"""Custom exceptions - SoC principle"""

class ClassboardError(Exception):
    """Base exception for the classboard service"""
    pass

class ValidationError(ClassboardError):
    """Input validation error"""
    pass

class StorageUnavailable(ClassboardError):
    """Submission or enrollment store could not be reached"""
    pass

class MalformedRecord(ClassboardError):
    """Submission record cannot be scored"""
    pass

class UnknownOutcome(MalformedRecord):
    """Outcome label not registered for its category"""

    def __init__(self, category: str, label: str):
        self.category = category
        self.label = label
        super().__init__(f"Unknown outcome '{label}' for category '{category}'")
