from .candidate import (
    AVAILABILITY_TAGS,
    availability_of,
    build_candidate,
    experience_count,
    experiences_of,
    has_valid_name,
)
