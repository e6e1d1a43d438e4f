"""Custom exceptions - SoC principle"""

class StudentsServiceError(Exception):
    """Base exception for the students service"""
    def __init__(self, message: str, code: int = 400):
        self.message = message
        self.code = code
        super().__init__(self.message)

class ValidationError(StudentsServiceError):
    """Input validation error"""
    pass

class StudentNotFoundError(StudentsServiceError):
    """Student id does not exist"""
    def __init__(self, message: str = "Student not found"):
        super().__init__(message, 404)

class StudentAlreadyExistsError(StudentsServiceError):
    """Student id is already taken"""
    def __init__(self, message: str = "Student already exists"):
        super().__init__(message, 409)

class StoreUnavailableError(StudentsServiceError):
    """Document store could not complete the operation; never retried"""
    def __init__(self, message: str = "Student store unavailable"):
        super().__init__(message, 503)
