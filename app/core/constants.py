"""Application constants."""

from app.core.enums import MuscleRole

# Tie-break order: a mesh reachable from several roles is colored by the first one here
ROLE_PRECEDENCE: tuple[MuscleRole, ...] = (
    MuscleRole.TARGET,
    MuscleRole.SYNERGIST,
    MuscleRole.DYNAMIC_STABILIZER,
    MuscleRole.STABILIZER,
    MuscleRole.ANTAGONIST_STABILIZER,
)

# Roles consulted, in order, when resolving an exercise's muscle groups
GROUP_RESOLUTION_ROLES: tuple[MuscleRole, ...] = (
    MuscleRole.TARGET,
    MuscleRole.SYNERGIST,
    MuscleRole.STABILIZER,
)

# Viewer palette per role
DEFAULT_ROLE_COLORS: dict[MuscleRole, str] = {
    MuscleRole.TARGET: "#ff3b30",  # red
    MuscleRole.SYNERGIST: "#ff2d55",  # pink
    MuscleRole.DYNAMIC_STABILIZER: "#ff9500",  # orange
    MuscleRole.STABILIZER: "#ffcc00",  # yellow
    MuscleRole.ANTAGONIST_STABILIZER: "#32ade6",  # cyan
}

# Selector palette per muscle group
DEFAULT_GROUP_COLORS: dict[str, str] = {
    "Neck": "#ff3b30",
    "Shoulders": "#34c759",
    "Upper Arms": "#007aff",
    "Forearms": "#ff9500",
    "Back": "#af52de",
    "Chest": "#ffcc00",
    "Waist": "#a2845e",
    "Hips": "#ff2d55",
    "Thighs": "#5856d6",
    "Calves": "#32ade6",
}

# Unselected meshes and groups without a palette entry
NEUTRAL_COLOR = "#ffffff"

# MuscleCorrelations.csv column positions
MUSCLE_COLUMNS = {
    "muscle_name": 0,
    "muscle_id": 1,
    "muscle_group": 4,
    "muscle_group_id": 5,
    "head_type": 6,
    "head_type_id": 7,
    "unique_head": 8,
    "unique_head_id": 9,
    "chirality": 10,
    "mesh_reference_name": 11,
}
MUSCLE_MIN_COLUMNS = 12

# exerciseData.csv column positions
EXERCISE_COLUMNS = {
    "exercise_name": 0,
    "exercise_id": 1,
    "form_type_id": 7,
}
ROLE_COLUMNS: dict[MuscleRole, int] = {
    MuscleRole.TARGET: 17,
    MuscleRole.SYNERGIST: 19,
    MuscleRole.DYNAMIC_STABILIZER: 21,
    MuscleRole.STABILIZER: 23,
    MuscleRole.ANTAGONIST_STABILIZER: 25,
}
EXERCISE_MIN_COLUMNS = 26

# Set history export
EXPORT_HEADER = ["ID", "Exercise Name", "Date", "Reps", "Weight", "Duration"]
EXPORT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
