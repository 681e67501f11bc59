"""Fixed label sets: challenge lists per dimension, demo data and plan option banks."""

from .models import Dimension

# Challenge descriptions an inspector can tag per dimension.
# Records store indexes into these lists, so entries must only ever be appended.
CHALLENGES: dict[Dimension, list[str]] = {
    Dimension.LANGUAGE: [
        "Low reading comprehension",
        "Weak written expression",
        "Limited vocabulary",
        "Gaps in basic literacy in lower grades",
        "Low motivation to read",
    ],
    Dimension.MATH: [
        "Gaps in number sense",
        "Difficulty with word problems",
        "Weak foundations from previous grades",
        "Math anxiety among students",
        "Shortage of qualified math teachers",
    ],
    Dimension.ENGLISH: [
        "Low oral proficiency",
        "Weak reading skills in English",
        "Large gaps between learning groups",
        "Limited exposure to the language outside school",
    ],
    Dimension.SCIENCE: [
        "Lack of laboratory equipment",
        "Little inquiry-based learning",
        "Low achievement in external assessments",
        "Insufficient instructional hours",
    ],
    Dimension.CLIMATE: [
        "Violence or bullying incidents",
        "Low sense of belonging among students",
        "Poor student-teacher relationships",
        "Discipline problems in classrooms",
        "High absenteeism",
    ],
    Dimension.STAFF_STABILITY: [
        "High teacher turnover",
        "Many substitute teachers",
        "Frequent principal changes",
        "Long-term vacancies",
    ],
    Dimension.VISION: [
        "No shared school vision",
        "Vision not translated into work plans",
        "Staff unaware of school goals",
        "Vision not updated in recent years",
    ],
    Dimension.STAFF_QUALITY: [
        "Teachers teaching outside their subject",
        "Limited professional development",
        "Many novice teachers without mentoring",
        "Low use of data to guide instruction",
    ],
    Dimension.LEADERSHIP: [
        "Principal lacks pedagogical leadership",
        "No middle-management layer",
        "Decisions made without staff involvement",
        "Weak follow-up on decisions",
    ],
    Dimension.COLLABORATION: [
        "Weak ties with the local authority",
        "Little cooperation with community organizations",
        "No partnerships with other schools",
    ],
    Dimension.PARENT_INVOLVEMENT: [
        "Low attendance at parent meetings",
        "Tension between parents and staff",
        "Language barriers with families",
        "Parents not involved in learning at home",
    ],
    Dimension.TEACHING_ORGANIZATION: [
        "Rigid timetable",
        "No differentiated instruction",
        "Ineffective use of instructional time",
        "Weak coordination between grade levels",
    ],
    Dimension.TEACHER_COLLABORATION: [
        "No regular team meetings",
        "Teachers work in isolation",
        "Little sharing of teaching materials",
        "No peer observation culture",
    ],
}


# Demo cohort loaded from the mapping page: (name, principal, students, scores, notes).
# Scores follow Dimension declaration order; "" means unrated.
DEMO_SCHOOLS = [
    (
        "Oak Hill Elementary", "Dana Levi", "320",
        ["4", "4", "3", "4", "5", "4", "4", "4", "5", "4", "3", "4", "4"],
        "Stable school, strong leadership team.",
    ),
    (
        "Riverside Middle", "Avi Cohen", "540",
        ["2", "2", "3", "2", "2", "1", "3", "2", "2", "3", "2", "2", "2"],
        "High staff turnover this year; climate concerns.",
    ),
    (
        "Hillcrest Elementary", "Maya Friedman", "210",
        ["3", "3", "4", "3", "3", "4", "3", "3", "4", "3", "4", "3", "3"],
        "Math results declining for two years.",
    ),
    (
        "Lakeview Comprehensive", "Yossi Mizrahi", "780",
        ["3", "4", "4", "4", "4", "3", "4", "4", "3", "4", "4", "4", "4"],
        "",
    ),
]


# Intervention plan wizard
WIZARD_STEPS = [
    "Goals and objectives",
    "MTSS intervention planning",
    "Intervention plan summary",
    "Core support actions",
    "Partners and resources",
    "Operational work plan",
    "Summary and report",
]

ACTION_CATEGORIES = [
    "Professional development",
    "Mentoring and coaching",
    "Data-driven instruction",
    "School climate",
    "Community and parents",
]
PARTNER_CATEGORIES = ["Local authority", "Community organization", "Academia", "Ministry unit", "Other"]
RESOURCE_CATEGORIES = ["Budget", "Staffing hours", "Digital tools", "Learning materials", "Other"]
TASK_STATUSES = ["Not started", "In progress", "Done", "Blocked"]
TIER_OPTIONS = ["Tier 1", "Tier 2", "Tier 3"]
TARGET_AUDIENCE_OPTIONS = ["Principals", "Teachers", "Students", "Parents", "Management teams"]
FREQUENCY_OPTIONS = ["Weekly", "Bi-weekly", "Monthly", "Once a term", "One-off"]

SUGGESTED_ACTIONS_BANK = [
    {
        "name": "Principals' learning community",
        "description": "Monthly peer-learning meetings for principals around shared data.",
        "category": "Professional development",
        "tier": "Tier 1",
        "target_audience": "Principals",
        "frequency": "Monthly",
    },
    {
        "name": "Data walkthroughs",
        "description": "Joint review of achievement data with each school's management team.",
        "category": "Data-driven instruction",
        "tier": "Tier 2",
        "target_audience": "Management teams",
        "frequency": "Once a term",
    },
    {
        "name": "Intensive instructional coaching",
        "description": "Weekly on-site coaching for core-subject teachers.",
        "category": "Mentoring and coaching",
        "tier": "Tier 3",
        "target_audience": "Teachers",
        "frequency": "Weekly",
    },
    {
        "name": "Climate improvement program",
        "description": "Structured program to strengthen belonging and reduce violence.",
        "category": "School climate",
        "tier": "Tier 2",
        "target_audience": "Students",
        "frequency": "Bi-weekly",
    },
]

SUGGESTED_PARTNERS_BANK = [
    {"name": "Municipal education department", "category": "Local authority", "role": "Funding and coordination"},
    {"name": "Regional teacher center", "category": "Ministry unit", "role": "Professional development"},
    {"name": "Parents' association", "category": "Community organization", "role": "Family engagement"},
]

SUGGESTED_RESOURCES_BANK = [
    {"name": "Coaching hours", "category": "Staffing hours", "details": "Instructional coach hours per school"},
    {"name": "Learning platform licences", "category": "Digital tools", "details": "Adaptive practice platform"},
    {"name": "Intervention budget", "category": "Budget", "details": "Dedicated budget for Tier 3 schools"},
]
