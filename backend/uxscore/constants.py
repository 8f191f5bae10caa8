"""Application-wide constants."""
import uuid


class Roles:
    """Role names known to the identity store."""
    ADMIN = "Admin"
    EVALUATOR = "Evaluator"

    ALL = (ADMIN, EVALUATOR)


# Score range accepted for a category score
MIN_SCORE = 1
MAX_SCORE = 5

# Column limits
PROJECT_NAME_MAX = 200
PROJECT_DESCRIPTION_MAX = 800
ACTOR_MAX = 200
WEBSITE_URL_MAX = 200
NOTES_MAX = 500
COMMENT_MAX = 800
CATEGORY_NAME_MAX = 200
CATEGORY_DESCRIPTION_MAX = 800
METRIC_URL_MAX = 2000
TEST_LOCATION_MAX = 100

# Lockout applied by the admin "lock" action
LOCKOUT_YEARS = 100

CATEGORY_IN_USE_MESSAGE = "Cannot delete category that is in use by evaluations."
UNKNOWN_CATEGORY_NAME = "Unknown Category"


# Canonical rubric seeded at schema creation: (id, name, description)
SEEDED_CATEGORIES = [
    (
        uuid.UUID("550e8400-e29b-41d4-a716-446655440001"),
        "Navigation and Flow",
        "Ease of moving through the site; menu clarity; intuitive paths to key tasks (e.g., finding listings)",
    ),
    (
        uuid.UUID("00839fa9-1488-4f9b-9850-d9c9b63ceb88"),
        "Search and Filters",
        "Effectiveness of search bar, filters, sorting options for narrowing listings",
    ),
    (
        uuid.UUID("cc0b54e0-9d3e-4fd7-9223-75f1f2c8aea5"),
        "Visual Design",
        "Aesthetics, color scheme, typography, spacing, alignment, branding consistency",
    ),
    (
        uuid.UUID("06315079-4387-4368-bebc-cb2c352517eb"),
        "Content & Info Clarity",
        "Accuracy, structure, and readability of listing details, pricing, agent info, amenities",
    ),
    (
        uuid.UUID("3a97b348-3fc6-4f5a-b102-1f9ad0e0a1b4"),
        "Responsiveness",
        "Usability and layout behavior on mobile/tablet devices/desktop; adaptive design",
    ),
    (
        uuid.UUID("213bbc6c-9475-4bd1-87ee-4f6815a3e63c"),
        "Performance",
        "Page load time, smoothness of transitions/ interactions, image loading",
    ),
    (
        uuid.UUID("d95bbd50-e928-4eb2-ab6d-f11b31a89a47"),
        "Accessibility",
        "Compliance with accessibility practices: alt text, keyboard nav, contrast, ARIA roles",
    ),
    (
        uuid.UUID("b8d4dedd-a754-47f5-9962-b4cb3e15ddfd"),
        "Interaction Feedback",
        "Feedback from buttons, hover effects, active states, error/success messages",
    ),
    (
        uuid.UUID("4f753930-9442-4ae4-8a57-ed5d9ad62489"),
        "Help and Support Info",
        "Clarity of contact details, FAQs, or support resources; availability of help during navigation",
    ),
    (
        uuid.UUID("b87b16d8-67ad-409a-a804-48976c134ec1"),
        "Overall Experience",
        "General impression, perceived ease of use, and whether the site builds trust and engagement",
    ),
]


# Bootstrap accounts: (username, email, password, role)
BOOTSTRAP_USERS = [
    ("admin", "admin@uxscore.com", "Admin123!", Roles.ADMIN),
    ("evaluator", "evaluator@uxscore.com", "Evaluator123!", Roles.EVALUATOR),
]
