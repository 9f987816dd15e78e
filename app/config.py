# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))

# Session Settings
_VERIFY_SESSION_ON_STARTUP = os.getenv("VERIFY_SESSION_ON_STARTUP", "true").lower() in ("true", "1", "yes")

# Console log level (the log file always records DEBUG)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Data directory override (useful for portable installs)
_DATA_DIR = os.getenv("LUXQUOTE_DATA_DIR", None)

# WhatsApp contact numbers offered on the quote summary
_WHATSAPP_UAE = os.getenv("WHATSAPP_UAE", "+971585815601")
_WHATSAPP_INDIA = os.getenv("WHATSAPP_INDIA", "+919648555355")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Luxone Quotation"
    APP_TITLE: str = "Luxone Worktop Quotation System"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Luxone"
    ORGANIZATION_DOMAIN: str = "luxone.ae"

    # HTTP API Backend Settings
    # If .env not found, uses default (http://localhost:5000/api)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT

    # Credential verification endpoints (relative to API_BASE_URL)
    USER_LOGIN_ENDPOINT: str = "/users/login"
    ADMIN_LOGIN_ENDPOINT: str = "/users/admin-login"
    SUPER_ADMIN_LOGIN_ENDPOINT: str = "/users/super-admin-login"
    VERIFY_ENDPOINT: str = "/users/verify"

    # Quotation persistence endpoints
    QUOTATIONS_ENDPOINT: str = "/quotations"
    QUOTATION_PIECES_ENDPOINT: str = "/quotation_pieces"

    # Quote summary contact (https://wa.me/<digits>)
    WHATSAPP_URL: str = "https://wa.me/"
    WHATSAPP_UAE: str = _WHATSAPP_UAE
    WHATSAPP_INDIA: str = _WHATSAPP_INDIA

    # Re-check a stored token against the backend when the app starts
    VERIFY_SESSION_ON_STARTUP: bool = _VERIFY_SESSION_ON_STARTUP

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = Path(_DATA_DIR) if _DATA_DIR else PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Durable session storage (QSettings INI file)
    SESSION_FILE: Path = DATA_DIR / "session.ini"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1100
    WINDOW_MIN_HEIGHT: int = 760

    # Fonts
    FONT_FAMILY: str = "Segoe UI"
    FONT_SIZE: int = 10

    # Branding Colors
    PRIMARY_COLOR: str = "#2563EB"
    PRIMARY_DARK: str = "#1D4ED8"
    TEXT_COLOR: str = "#111827"
    TEXT_LIGHT: str = "#6B7280"
    BACKGROUND_COLOR: str = "#F9FAFB"
    CARD_BACKGROUND: str = "#FFFFFF"
    BORDER_COLOR: str = "#E5E7EB"
    ERROR_COLOR: str = "#B91C1C"
    ERROR_BACKGROUND: str = "#FEF2F2"
    INPUT_BORDER: str = "#D1D5DB"

    # Quotation Wizard
    QUOTE_PREFIX: str = "LUX"


# Page identifiers
class Pages:
    LOGIN = "login"
    ADMIN_LOGIN = "admin_login"
    SUPER_ADMIN_LOGIN = "super_admin_login"
    DASHBOARD = "dashboard"
    QUOTATION = "quotation"
    ADMIN_PANEL = "admin_panel"
    SUPER_ADMIN = "super_admin"
    UNAUTHORIZED = "unauthorized"
