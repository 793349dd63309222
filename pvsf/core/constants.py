"""Core constants: field values, query limits, cache directives."""

# Field values
VIDEO_STATUS_PUBLISHED = "published"
XLINK_STATUS_LINKED = "linked"
ROLE_ADMIN = "admin"
ROLE_USER = "user"

# Icon lookup scans at most this many recent videos per author.
ICON_LOOKUP_LIMIT = 50

# Shared-cache (CDN) policies for the public listing routes.
CACHE_CONTROL_USERS = "public, s-maxage=300, stale-while-revalidate=600"
CACHE_CONTROL_VIDEOS = "public, s-maxage=60, stale-while-revalidate=300"

# Client-visible message for every 5xx response.
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Admin-only views (soft-deleted videos) must never reach a shared cache.
CACHE_CONTROL_PRIVATE = "private, no-store"

# Member autocomplete: in-process cache lifetime and result caps.
MEMBER_SUGGESTIONS_CACHE_KEY = "member_suggestions"
MEMBER_SUGGESTIONS_TTL_SECONDS = 300
MEMBER_SUGGESTIONS_LIST_LIMIT = 100
MEMBER_SUGGESTIONS_MATCH_LIMIT = 20
MEMBER_SUGGESTIONS_MIN_SIMILARITY = 30
