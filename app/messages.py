from enum import Enum


class ErrorMessages(str, Enum):
    UNAUTHENTICATED_USER = "You are not authenticated. Please login to continue"
    UNAUTHORIZED_ACCESS = "Unauthorized access"
    INVALID_TOKEN = "Invalid or expired token supplied"
    FIRSTNAME_MIN_LENGTH_ERROR = "Firstname must be at least 3 characters long"
    LASTNAME_MIN_LENGTH_ERROR = "Lastname must be at least 3 characters long"
    INVALID_EMAIL_SUPPLIED = "Invalid email address supplied"
    PASSWORD_STRENGTH_ERROR = (
        "Password must be at least 8 characters long and contain an uppercase letter, "
        "a lowercase letter, a number and a special character"
    )
    PASSWORDS_DO_NOT_MATCH = "Password and password confirmation do not match"
    USER_ALREADY_EXISTS = "A user with this email already exists"
    USER_NOT_FOUND = "User not found"
    INCORRECT_LOGIN_CREDENTIALS = "Incorrect login credentials"
    PRODUCT_ALREADY_EXISTS = "You already have a product with this name"
    PRODUCT_NOT_FOUND = "Product not found"


class SuccessMessages(str, Enum):
    REGISTRATION_SUCCESSFUL = "Registration successful"
    LOGIN_SUCCESSFUL = "Login successful"
    PRODUCT_DELETED = "Product deleted"
