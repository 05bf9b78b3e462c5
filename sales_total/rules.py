"""
Fixed rules for the total-sales pipeline.

Everything here is a constant on purpose: the pipeline reads no environment
variables and no files. Callers that need other values pass them explicitly.
"""

ATTACHMENT_NAME = "data.csv"

# Built-in attachment: Products/Sales table (Phones 1000, Books 123.45, Notebooks 111.11).
DEFAULT_ATTACHMENT_URL = (
    "data:text/csv;base64,"
    "UHJvZHVjdHMsU2FsZXMKUGhvbmVzLDEwMDAKQm9va3MsMTIzLjQ1Ck5vdGVib29rcywxMTEuMTEK"
)

DATA_URL_PREFIX = "data:"
DEFAULT_MEDIA_TYPE = "text/plain"
BASE64_TOKEN = "base64"
ACCEPTED_MEDIA_HINTS = ("csv", "text")

# Order matters: on equal counts the earlier candidate wins.
DELIMITER_CANDIDATES = (",", ";", "\t")
DEFAULT_DELIMITER = ","

SALES_KEYWORDS = ("sales", "sale")

ELEMENT_ID = "total-sales"
LOADING_TEXT = "Loading..."
ERROR_TEXT = "Error loading data"
DISPLAY_DECIMALS = 2

FETCH_TIMEOUT_SECONDS = 30.0
REMOTE_DEFAULT_ENCODING = "utf-8"
