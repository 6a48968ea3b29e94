"""
Central configuration, imports, availability flags, and constants.

All optional library imports and their availability flags are managed here.
Other modules import what they need from this module.
"""
import logging
import sys

from fileinfo.user_config import get_config_value

# --- Ensure pefile is available (Critical Dependency) ---
try:
    import pefile
except ImportError:
    print("[!] CRITICAL ERROR: The 'pefile' library is not found.", file=sys.stderr)
    print("[!] This library is essential for the PE adapters to function.", file=sys.stderr)
    print("[!] Install it with: pip install pefile", file=sys.stderr)
    sys.exit(1)

# --- Logging Setup ---
_LOG_LEVEL_NAME = (get_config_value("log_level") or "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _LOG_LEVEL_NAME, logging.INFO),
    format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
)
logger = logging.getLogger("fileinfo")

# --- Optional Library Imports & Availability Flags ---
CRYPTOGRAPHY_AVAILABLE = False
CRYPTOGRAPHY_IMPORT_ERROR = None
try:
    from cryptography import x509
    from cryptography.hazmat.primitives.serialization import pkcs7
    CRYPTOGRAPHY_AVAILABLE = True
except ImportError as e:
    CRYPTOGRAPHY_IMPORT_ERROR = str(e)

# --- Constants ---
# Default cap on TLS callbacks followed by the PE adapter.
DEFAULT_MAX_TLS_CALLBACKS = 20

# Shortest run of printable characters reported as a string.
DEFAULT_MIN_STRING_LENGTH = 5

# Names accepted by populate_from_pe(analyses_to_skip=...), in run order.
ANALYSIS_NAMES = (
    "header", "data_directories", "sections", "entry_point", "imports",
    "exports", "resources", "version_info", "pdb", "rich_header", "tls",
    "dotnet", "relocations", "timestamps", "certificates", "strings",
    "anomalies",
)

if CRYPTOGRAPHY_AVAILABLE:
    logger.debug("cryptography library found. Certificate tables will be populated.")
else:
    logger.warning(
        f"cryptography library not found. Certificate tables will be skipped. "
        f"Import error: {CRYPTOGRAPHY_IMPORT_ERROR}"
    )
