import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Game state is kept in the signed session cookie
SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
SESSION_COOKIE_HTTPONLY = True

PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
