"""Skill points spent from the escape menu: health, attack and speed bars."""

from __future__ import annotations

from dataclasses import dataclass

SKILL_STEP = 25
SKILL_MAX = 325
SKILL_COST = 25
ATTACK_MALUS_STEP = 0.12


@dataclass
class Skills:
    """Skill bar lengths, experience left to spend and the sprint energy malus."""

    health: int = 0
    attack: int = 0
    speed: int = 0
    xp: int = 0
    energy_malus: float = 0.0

    def _can_raise(self, value: int) -> bool:
        return value < SKILL_MAX and self.xp > SKILL_COST

    def upgrade_health(self) -> bool:
        """Raise the health bar one step; returns True if it was raised."""
        if not self._can_raise(self.health):
            return False
        self.health += SKILL_STEP
        self.xp -= SKILL_COST
        return True

    def upgrade_attack(self) -> bool:
        """Raise the attack bar one step, which also lowers the energy malus."""
        if not self._can_raise(self.attack):
            return False
        self.attack += SKILL_STEP
        self.xp -= SKILL_COST
        self.energy_malus -= ATTACK_MALUS_STEP
        return True

    def upgrade_speed(self) -> bool:
        """Raise the speed bar one step; returns True if it was raised."""
        if not self._can_raise(self.speed):
            return False
        self.speed += SKILL_STEP
        self.xp -= SKILL_COST
        return True