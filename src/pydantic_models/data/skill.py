from enum import Enum


class Skill(str, Enum):
    """
    Fähigkeiten der Berater mit zugehörigem Stundensatz.
    """
    PROJECT_MANAGER = "Project Manager"
    SYSTEM_ARCHITECT = "System Architect"
    SOFTWARE_ENGINEER = "Software Engineer"
    SOFTWARE_TESTER = "Software Tester"
    UNKNOWN_SKILL = "Unknown Skill"

    @property
    def rate(self) -> float:
        """
        Stundensatz für diese Fähigkeit.
        """
        return _RATES[self]

    def __str__(self) -> str:
        return self.value


_RATES = {
    Skill.PROJECT_MANAGER: 250.0,
    Skill.SYSTEM_ARCHITECT: 200.0,
    Skill.SOFTWARE_ENGINEER: 150.0,
    Skill.SOFTWARE_TESTER: 100.0,
    Skill.UNKNOWN_SKILL: 0.0,
}
