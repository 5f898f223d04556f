"""Core constants: upload folders, limits and shared literal values."""

# Image store folders
POST_IMAGE_FOLDER = "news-posts"
AD_IMAGE_FOLDER = "news-ads"

NAV_MENU_MAX_CATEGORIES = 10

POST_TITLE_MIN_LENGTH = 10

# Pagination defaults
DEFAULT_PAGE_SIZE = 10
SUBSCRIPTION_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Sentinel form values meaning "no subcategory"
EMPTY_FORM_VALUES = frozenset({"", "null", "undefined"})
