"""
Reference data for the generators.

Contains:
- Collection (table) names
- Category enums with selection weights
- Curated "common" records seeded before random fill
- Name, title, location and role vocabularies
- Milestone templates
"""


class Collections:
    """Store table names."""

    ORGANIZATIONS = "organizations"
    ACTIVITY_GROUPS = "activity_groups"
    TAGS = "tags"
    PEOPLE = "people"
    AFFILIATIONS = "affiliations"
    PERSON_ACTIVITIES = "person_activities"
    PERSON_TAGS = "person_tags"
    RELATIONSHIP_TYPES = "relationship_types"
    RELATIONSHIPS = "relationships"
    MILESTONE_TEMPLATES = "mentor_milestones"
    RELATIONSHIP_MILESTONES = "relationship_milestones"
    INTERACTIONS = "interactions"
    INTERACTION_PARTICIPANTS = "interaction_participants"


# =============================================================================
# Organizations
# =============================================================================

ORGANIZATION_TYPE_WEIGHTS = [
    ("university", 25),
    ("nonprofit", 20),
    ("corporation", 20),
    ("k12", 15),
    ("community", 10),
    ("government", 5),
    ("religious", 5),
]

ORGANIZATION_NAME_SUFFIXES = {
    "university": ["University", "College", "Institute", "Academy"],
    "corporation": ["Inc.", "Corp.", "LLC", "Group", ""],
    "nonprofit": ["Foundation", "Initiative", "Alliance", "Society", "Association"],
    "k12": ["High School", "Academy", "Preparatory School", "Middle School", "Elementary"],
}

COMMON_ORGANIZATIONS = [
    {"name": "Alumni Mentoring Network", "type": "nonprofit"},
    {"name": "City Community College", "type": "university"},
    {"name": "Youth Career Alliance", "type": "community"},
    {"name": "Lincoln High School", "type": "k12"},
]

NAME_ADJECTIVES = [
    "Bright",
    "United",
    "Rising",
    "Open",
    "Pioneer",
    "Horizon",
    "Summit",
    "Bridge",
    "Evergreen",
    "Keystone",
    "Northstar",
    "Compass",
]

# =============================================================================
# Activity Groups
# =============================================================================

ACTIVITY_CATEGORY_WEIGHTS = [
    ("academic", 20),
    ("career", 20),
    ("leadership", 15),
    ("volunteer", 10),
    ("extracurricular", 10),
    ("service", 10),
    ("community", 10),
    ("religious", 5),
]

ACTIVITY_NAME_SUFFIXES = {
    "academic": ["Study Group", "Academic Club", "Learning Circle", "Scholarship Program"],
    "career": ["Career Track", "Professional Group", "Industry Connect", "Career Prep"],
    "leadership": ["Leaders", "Leadership Circle", "Directors Program", "Executive Training"],
}
ACTIVITY_DEFAULT_SUFFIXES = ["Club", "Group", "Association", "Program", "Initiative"]

CAREER_FIELDS = [
    "Technology",
    "Finance",
    "Healthcare",
    "Engineering",
    "Marketing",
    "Design",
    "Policy",
    "Education",
]

COMMON_ACTIVITY_GROUPS = [
    {"name": "Mentorship Program", "category": "leadership"},
    {"name": "Career Development", "category": "career"},
    {"name": "Academic Support", "category": "academic"},
    {"name": "Alumni Association", "category": "community"},
    {"name": "Community Service", "category": "service"},
    {"name": "Leadership Training", "category": "leadership"},
    {"name": "Professional Development", "category": "career"},
    {"name": "Peer Tutoring", "category": "academic"},
]

ACTIVITY_ROLES = ["member", "leader", "coordinator", "participant"]

# =============================================================================
# Tags
# =============================================================================

TAG_CATEGORY_WEIGHTS = [
    ("interest", 25),
    ("skill", 25),
    ("status", 15),
    ("program", 15),
    ("demographic", 10),
    ("location", 10),
]

TAG_NAMES = {
    "interest": [
        "Programming",
        "Design",
        "Marketing",
        "Finance",
        "Research",
        "Entrepreneurship",
        "Data Science",
        "Creative Writing",
        "Public Speaking",
        "Business",
        "Healthcare",
        "Education",
        "Engineering",
    ],
    "skill": [
        "Python",
        "JavaScript",
        "Leadership",
        "Communication",
        "Project Management",
        "Public Speaking",
        "Writing",
        "Data Analysis",
        "Team Building",
        "Problem Solving",
        "Critical Thinking",
    ],
    "status": [
        "Active",
        "Inactive",
        "Needs Follow-up",
        "At Risk",
        "Graduated",
        "New",
        "Alumni",
        "VIP",
    ],
    "program": [
        "Summer Program",
        "Internship Program",
        "Leadership Initiative",
        "Exchange Program",
        "Graduate Program",
        "Scholarship Recipient",
        "Research Grant",
    ],
    "demographic": [
        "Undergraduate",
        "Graduate",
        "International",
        "First Generation",
        "Transfer",
        "Veteran",
        "Part-time",
    ],
}

COMMON_TAGS = [
    {"name": "First Generation", "category": "demographic", "color": "#4285F4"},
    {"name": "STEM", "category": "interest", "color": "#34A853"},
    {"name": "High Priority", "category": "status", "color": "#EA4335"},
    {"name": "New Mentor", "category": "status", "color": "#FBBC05"},
    {"name": "Leadership", "category": "skill", "color": "#8E44AD"},
    {"name": "Alumni", "category": "status", "color": "#3498DB"},
    {"name": "Remote", "category": "location", "color": "#1ABC9C"},
    {"name": "Transfer Student", "category": "demographic", "color": "#E74C3C"},
    {"name": "Scholarship", "category": "program", "color": "#F39C12"},
    {"name": "Needs Check-in", "category": "status", "color": "#FF5733"},
]

# =============================================================================
# People
# =============================================================================

STUDENT_PROBABILITY = 0.3
EARLIEST_GRADUATION_YEAR = 1990

EMPLOYMENT_STATUSES = [
    "full_time",
    "part_time",
    "intern",
    "unemployed",
    "self_employed",
    "freelance",
    "student",
]

POST_GRAD_STATUSES = [
    "employed",
    "seeking_employment",
    "grad_school",
    "gap_year",
    "service_year",
    "entrepreneurship",
]

# =============================================================================
# Relationships
# =============================================================================

RELATIONSHIP_TYPES = [
    "mentor_student",
    "peer_mentor",
    "coach",
    "sponsor",
    "alumni_student",
]
PRIMARY_RELATIONSHIP_TYPE = "mentor_student"
INACTIVE_STATUSES = ["inactive", "completed"]

MENTOR_MIN_YEARS_SINCE_GRADUATION = 3
STUDENT_MAX_YEARS_SINCE_GRADUATION = 5
MAX_MENTORS_PER_STUDENT = 2
MAX_PAIR_ATTEMPTS = 10

# =============================================================================
# Milestones
# =============================================================================

MILESTONE_TEMPLATES = [
    {
        "name": "Initial Meeting",
        "description": "First meeting between mentor and mentee to establish relationship",
        "is_required": True,
        "typical_year": 1,
    },
    {
        "name": "Goal Setting",
        "description": "Establish key goals and outcomes for the mentorship",
        "is_required": True,
        "typical_year": 1,
    },
    {
        "name": "Mid-term Check-in",
        "description": "Review progress toward goals and adjust as needed",
        "is_required": False,
        "typical_year": 1,
    },
    {
        "name": "Career Planning",
        "description": "Discussion about career paths and opportunities",
        "is_required": False,
        "typical_year": 1,
    },
    {
        "name": "Resume Review",
        "description": "Review and improve resume/CV",
        "is_required": False,
        "typical_year": 1,
    },
    {
        "name": "Annual Review",
        "description": "End of year review and planning for next year",
        "is_required": True,
        "typical_year": 1,
    },
    {
        "name": "Job Shadow Day",
        "description": "Mentee shadows mentor at workplace",
        "is_required": False,
        "typical_year": 2,
    },
    {
        "name": "Internship/Job Search",
        "description": "Support with internship or job search process",
        "is_required": False,
        "typical_year": 2,
    },
    {
        "name": "Interview Preparation",
        "description": "Mock interviews and feedback",
        "is_required": False,
        "typical_year": 2,
    },
    {
        "name": "Professional Network Introduction",
        "description": "Introduction to professional network and contacts",
        "is_required": False,
        "typical_year": 2,
    },
]

# =============================================================================
# Interactions
# =============================================================================

TIMEFRAME_WEIGHTS = [
    ("past", 70),
    ("future", 10),
    ("recent", 20),
]

INTERACTION_TYPE_WEIGHTS = [
    ("meeting", 30),
    ("call", 25),
    ("video_call", 15),
    ("email", 10),
    ("text", 5),
    ("lunch", 5),
    ("workshop", 5),
    ("social_event", 5),
]
INTERACTION_TYPES = [value for value, _ in INTERACTION_TYPE_WEIGHTS]
GROUP_INTERACTION_TYPES = ("workshop", "social_event")

DURATION_MINUTES = [30, 45, 60, 90, 120]
RECENT_WINDOW_DAYS = 30
FUTURE_WINDOW_DAYS = 30

INTERACTION_TITLES = {
    "meeting": [
        "Mentorship Meeting",
        "Check-in Meeting",
        "Progress Review",
        "Planning Session",
        "Goal Setting Meeting",
        "Career Discussion",
    ],
    "call": [
        "Mentorship Call",
        "Quick Check-in",
        "Status Update Call",
        "Virtual Meeting",
        "Feedback Session",
        "Progress Discussion",
    ],
    "email": [
        "Email Correspondence",
        "Written Update",
        "Resource Sharing",
        "Follow-up Email",
        "Introduction Email",
        "Schedule Coordination",
    ],
    "text": [
        "Text Check-in",
        "Quick Update",
        "Text Correspondence",
        "Scheduling Text",
        "Reminder Message",
        "Quick Question",
    ],
    "social_event": [
        "Networking Event",
        "Social Gathering",
        "Alumni Mixer",
        "Community Event",
        "Department Social",
        "Industry Meetup",
    ],
    "workshop": [
        "Skill-building Workshop",
        "Training Session",
        "Professional Development",
        "Learning Workshop",
        "Hands-on Training",
        "Practical Workshop",
    ],
    "lunch": [
        "Mentorship Lunch",
        "Informal Lunch Meeting",
        "Lunch Discussion",
        "Career Lunch",
        "Networking Lunch",
        "Lunch Check-in",
    ],
}
INTERACTION_TITLES["video_call"] = INTERACTION_TITLES["call"]

VIDEO_PLATFORMS = ["Zoom", "Microsoft Teams", "Google Meet", "Skype"]
LUNCH_VENUE_SUFFIXES = ["Cafe", "Restaurant", "Bistro", "Diner"]
EVENT_VENUES = ["Conference Room A", "Student Center", "Community Hall", "Downtown Venue"]
MEETING_VENUES = ["Campus Center", "Library"]
MEETING_ROOMS = ["Conference Room A", "Meeting Room 3B", "Office 205", "Study Room 4"]
WORKSHOP_MATERIALS = [
    "Slides and handouts provided",
    "Bring laptop",
    "Pre-reading required",
    "All materials provided",
]
DRESS_CODES = ["Business casual", "Casual", "Business formal", "Smart casual"]

# Score ranges (inclusive) for completed interactions
QUALITY_SCORE_RANGE = (50, 100)
RECIPROCITY_SCORE_RANGE = (40, 100)
SENTIMENT_SCORE_RANGE = (45, 100)

# Strength ranges (inclusive) for generated relationships
ACTIVE_STRENGTH_RANGE = (50, 95)
INACTIVE_STRENGTH_RANGE = (20, 70)

PERIPHERAL_ROLES = ["observer", "participant", "guest"]
