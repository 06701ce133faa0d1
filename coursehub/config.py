"""Fixed settings: the built-in administrator and the data files."""

from dataclasses import dataclass
from pathlib import Path

ADMIN_ID = 0
ADMIN_PASSWORD = "password"

USERS_FILE = "users.dat"
IDS_FILE = "ids.dat"
HOMEWORKS_FILE = "homeworks.dat"
COURSES_FILE = "courses.dat"
ASSIGNMENTS_FILE = "assignments.dat"
MESSAGES_FILE = "messages.dat"
TEMP_FILE = "temp.dat"

FILE_NAMES = (
    USERS_FILE,
    IDS_FILE,
    HOMEWORKS_FILE,
    COURSES_FILE,
    ASSIGNMENTS_FILE,
    MESSAGES_FILE,
    TEMP_FILE,
)


@dataclass(frozen=True)
class DataFiles:
    """Locations of every data file, all kept in one directory."""

    directory: Path = Path(".")

    def __post_init__(self) -> None:
        object.__setattr__(self, "directory", Path(self.directory))

    @property
    def users(self) -> Path:
        return self.directory / USERS_FILE

    @property
    def ids(self) -> Path:
        return self.directory / IDS_FILE

    @property
    def homeworks(self) -> Path:
        return self.directory / HOMEWORKS_FILE

    @property
    def courses(self) -> Path:
        return self.directory / COURSES_FILE

    @property
    def assignments(self) -> Path:
        return self.directory / ASSIGNMENTS_FILE

    @property
    def messages(self) -> Path:
        return self.directory / MESSAGES_FILE

    @property
    def temp(self) -> Path:
        return self.directory / TEMP_FILE

    def all(self) -> tuple[Path, ...]:
        """Every data file, in the fixed order of FILE_NAMES."""
        return tuple(self.directory / name for name in FILE_NAMES)