"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for page ids, form options and messages.
"""

# Wizard pages in display order. Keys double as the page identifiers stored
# in session state.
PAGES = ["landing", "signin", "signup", "farmDetails", "crops", "plan", "dashboard"]

DEFAULT_START_PAGE = "signin"
FALLBACK_PAGE = "landing"

# Shown on the dashboard until the user profile carries a real name
DEFAULT_DISPLAY_NAME = "John Farmer"

SOIL_TYPES = ["Clay", "Sandy", "Loamy", "Silt", "Peaty", "Chalky", "Black (Regur)", "Red"]

CLIMATES = ["Tropical", "Subtropical", "Temperate", "Arid", "Semi-arid", "Humid", "Cold"]

SOIL_IMAGE_TYPES = ["png", "jpg", "jpeg"]

PASSWORD_SYMBOLS = "@$!%*?&"

PASSWORD_RULES = [
    "At least 8 characters",
    "One uppercase letter",
    "One lowercase letter",
    "One number",
    f"One special character ({PASSWORD_SYMBOLS})",
]

# Field-level validation messages
PHONE_ERROR = "Phone number must be exactly 10 digits"
GMAIL_ERROR = "Please enter a valid Gmail address (@gmail.com)"
USERNAME_ERROR = "Username is required"
PASSWORD_ERROR = ("Password must be at least 8 characters with uppercase, "
                  "lowercase, number, and special character")
REQUIRED_ERROR = "{label} is required"
FARM_SIZE_ERROR = "Farm size must be a positive number"
