from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    element_description: str = "Index"
    position_description: str = "Position"
    log_failures: bool = False
