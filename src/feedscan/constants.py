"""Canonical constants for feedscan."""

import re

# Feed structure
FEED_SELECTOR = 'div[role="feed"]'
ARTICLE_SELECTOR = 'div[role="article"]'

# Loading indicators on placeholder articles
LOADING_SELECTORS = (
    '[aria-label="Loading..."]',
    '[data-visualcompletion="loading-state"]',
)
LOADING_LABEL = "Loading..."
LOADING_STATE_ATTRIBUTE = "data-visualcompletion"
LOADING_STATE_VALUE = "loading-state"

# Classification
COMMENT_LABEL_MARKER = "comment"
MIN_GENUINE_TEXT_LENGTH = 100  # strictly greater than

# Author extraction
HEADER_LINK_SELECTOR = "h2 a[href], h3 a[href], h4 a[href]"
ANCHOR_SELECTOR = "a[href]"
STRONG_LINK_SELECTOR = "strong a[href], b a[href]"
PROFILE_IMAGE_SELECTOR = "img, image"
AUTHOR_LABEL_PATTERN = re.compile(
    r"^(?:Post|Story) by ([^,]+?)(?:\s+(?:on|at|\d+)\s|,|$)",
    re.IGNORECASE,
)
MAX_AUTHOR_NAME_LENGTH = 100  # exclusive
MIN_AUTHOR_NAME_LENGTH = 1  # exclusive

FACEBOOK_BASE_URL = "https://www.facebook.com"

# Single-segment paths that are site sections, not people or pages
RESERVED_PROFILE_PATHS = {
    'groups', 'pages', 'events', 'watch', 'marketplace',
    'gaming', 'stories', 'reels', 'hashtag', 'search',
    'settings', 'notifications', 'messages', 'friends',
    'bookmarks', 'memories', 'saved', 'help', 'policies',
    'photo.php', 'permalink.php', 'story.php', 'login', 'home.php',
}

# Links that look profile-ish but point at content
NON_PROFILE_LINK_MARKERS = (
    '/groups/',
    '/posts/',
    '/comments/',
    '/photos/',
    '/photo/',
    '/events/',
    '/watch/',
    '/marketplace/',
    '/gaming/',
    '/stories/',
    '/reels/',
    '/hashtag/',
    '/share',
    '/sharer',
    '/permalink/',
)

# Tracking parameters dropped from profile URLs
TRACKING_PARAMS = {
    '__cft__', '__tn__', 'comment_id', 'reply_comment_id',
    'ref', 'fref', 'hc_ref', '__xts__', 'eid', 'rc', 'notif_id',
    'notif_t', 'ref_notif_type', 'acontext', 'aref',
}

# Body text extraction
TEXT_BLOCK_SELECTOR = 'div[dir="auto"]'
MIN_BODY_TEXT_LENGTH = 20  # strictly greater than
UI_CHROME_PATTERN = re.compile(
    r"^(?:Like|Comment|Share|Reply|\d+\s*(?:likes?|comments?|shares?))$",
    re.IGNORECASE,
)
SEE_MORE_PATTERN = re.compile(r"(?:See more|(?:\.\.\.|…)\s?more)\s*$", re.IGNORECASE)
# Truncation affordance left at the end of a collapsed body
SEE_MORE_SUFFIX_PATTERN = re.compile(r"\s*(?:…|\.\.\.)?\s*See more\s*$", re.IGNORECASE)
SEE_MORE_BUTTON_SELECTORS = (
    'div[role="button"]:text-is("See more")',
)

# Identifier extraction
PERMALINK_MARKERS = ('/posts/', '/permalink/', 'story_fbid=', 'pfbid')
MAX_PERMALINK_LENGTH = 300
METADATA_ATTRIBUTE = "data-ft"
METADATA_ID_KEYS = ('top_level_post_id', 'mf_story_key')

# (source name, pattern) in precedence order
ID_PATTERNS = (
    ('posts', re.compile(r"/posts/(\d+)")),
    ('permalink', re.compile(r"/permalink/(\d+)")),
    ('story_fbid', re.compile(r"story_fbid=(\d+)")),
    ('pfbid', re.compile(r"(pfbid[A-Za-z0-9]+)")),
)

# Readiness polling defaults
DEFAULT_READY_THRESHOLD = 3
DEFAULT_MAX_ATTEMPTS = 30
DEFAULT_SCROLL_PX = 500
DEFAULT_SLEEP_MS = 1000

# Dialogs that cover the feed on first load
DIALOG_CLOSE_SELECTORS = (
    '[aria-label="Close"]',
    '[aria-label="Not now"]',
    'div[role="button"]:has-text("Not now")',
)
