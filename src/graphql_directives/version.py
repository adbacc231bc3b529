from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "0.3.0"


class VersionInfo(NamedTuple):
    """Version of the package as a comparable tuple, like ``sys.version_info``."""

    major: int
    minor: int
    micro: int
    releaselevel: str = "final"
    serial: int = 0

    def __str__(self) -> str:
        v = f"{self.major}.{self.minor}.{self.micro}"
        level = self.releaselevel
        if level != "final":
            v = f"{v}{level[:1]}{self.serial}"
        return v


# must be kept in sync with the version string above
version_info = VersionInfo(0, 3, 0)
