"""Entity templates read from the game's JSON data files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .common import Attributes, Quality
from .shapes import (
    BaseShape,
    ShapeDirection,
    new_circle,
    new_cone,
    new_line,
    new_rectangle,
    new_square,
)


def _field(data: dict, key: str, default: Any = None) -> Any:
    """Look a key up exactly, then ignoring case."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return default


def _mapping(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be a JSON object, not {type(data).__name__}")
    return data


def _int(data: dict, key: str) -> int:
    value = _field(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{key!r} must be a whole number, not {value}")
    return int(value)


def _float(data: dict, key: str) -> float:
    value = _field(data, key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, not {type(value).__name__}")
    return float(value)


def _str(data: dict, key: str) -> str:
    value = _field(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


def _optional(data: dict, key: str) -> dict | None:
    value = _field(data, key)
    if value is None:
        return None
    return _mapping(value, key)


@dataclass
class AttributesTemplate:
    max_health: int = 0
    attack_bonus: int = 0
    base_armor_class: int = 0
    base_protection: int = 0
    base_dodge_chance: float = 0.0
    base_movement_speed: int = 0
    damage_bonus: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> AttributesTemplate:
        data = _mapping(data, "attributes")
        return cls(
            max_health=_int(data, "MaxHealth"),
            attack_bonus=_int(data, "AttackBonus"),
            base_armor_class=_int(data, "BaseArmorClass"),
            base_protection=_int(data, "BaseProtection"),
            base_dodge_chance=_float(data, "BaseDodgeChance"),
            base_movement_speed=_int(data, "BaseMovementSpeed"),
            damage_bonus=_int(data, "damagebonus"),
        )

    def to_attributes(self) -> Attributes:
        return Attributes.base(
            self.max_health,
            self.attack_bonus,
            self.base_armor_class,
            self.base_protection,
            self.base_movement_speed,
            self.base_dodge_chance,
            self.damage_bonus,
        )


@dataclass
class ArmorTemplate:
    armor_class: int = 0
    protection: int = 0
    dodge_chance: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> ArmorTemplate:
        data = _mapping(data, "armor")
        return cls(
            armor_class=_int(data, "armorClass"),
            protection=_int(data, "protection"),
            dodge_chance=_float(data, "dodgeChance"),
        )


@dataclass
class TargetAreaTemplate:
    """The area a ranged weapon covers; which sizes matter depends on the type."""

    type: str = ""
    size: int = 0
    length: int = 0
    width: int = 0
    height: int = 0
    radius: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> TargetAreaTemplate:
        data = _mapping(data, "targetArea")
        return cls(
            type=_str(data, "type"),
            size=_int(data, "size"),
            length=_int(data, "length"),
            width=_int(data, "width"),
            height=_int(data, "height"),
            radius=_int(data, "radius"),
        )


def create_target_area(area: TargetAreaTemplate | None) -> BaseShape | None:
    """A normal-quality shape for the area; a missing area gives a square, an unknown type None."""
    if area is None or area.type == "Square":
        return new_square(0, 0, Quality.NORMAL)
    if area.type == "Rectangle":
        return new_rectangle(0, 0, Quality.NORMAL)
    if area.type == "Cone":
        return new_cone(0, 0, ShapeDirection.LINE_DOWN, Quality.NORMAL)
    if area.type == "Line":
        return new_line(0, 0, ShapeDirection.LINE_DOWN, Quality.NORMAL)
    if area.type == "Circle":
        return new_circle(0, 0, Quality.NORMAL)
    return None


def _target_area(data: dict) -> TargetAreaTemplate | None:
    area = _optional(data, "targetArea")
    return TargetAreaTemplate.from_dict(area) if area is not None else None


@dataclass
class WeaponTemplate:
    """An entry of the weapon file, melee or ranged depending on its type."""

    type: str = ""
    name: str = ""
    img_name: str = ""
    min_damage: int = 0
    max_damage: int = 0
    attack_speed: int = 0
    shooting_range: int = 0
    ammo_type: str = ""
    shooting_vx: str = ""
    target_area: TargetAreaTemplate | None = None

    @classmethod
    def from_dict(cls, data: dict) -> WeaponTemplate:
        data = _mapping(data, "weapon")
        return cls(
            type=_str(data, "type"),
            name=_str(data, "name"),
            img_name=_str(data, "imgname"),
            min_damage=_int(data, "minDamage"),
            max_damage=_int(data, "maxDamage"),
            attack_speed=_int(data, "attackSpeed"),
            shooting_range=_int(data, "shootingRange"),
            ammo_type=_str(data, "ammoType"),
            shooting_vx=_str(data, "shootingvx"),
            target_area=_target_area(data),
        )


@dataclass
class MeleeWeaponTemplate:
    name: str = ""
    img_name: str = ""
    min_damage: int = 0
    max_damage: int = 0
    attack_speed: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> MeleeWeaponTemplate:
        data = _mapping(data, "meleeWeapon")
        return cls(
            name=_str(data, "name"),
            img_name=_str(data, "imgname"),
            min_damage=_int(data, "minDamage"),
            max_damage=_int(data, "maxDamage"),
            attack_speed=_int(data, "attackSpeed"),
        )

    @classmethod
    def from_weapon(cls, weapon: WeaponTemplate) -> MeleeWeaponTemplate:
        return cls(
            name=weapon.name,
            img_name=weapon.img_name,
            min_damage=weapon.min_damage,
            max_damage=weapon.max_damage,
            attack_speed=weapon.attack_speed,
        )


@dataclass
class RangedWeaponTemplate:
    name: str = ""
    shooting_vx_name: str = ""
    img_name: str = ""
    min_damage: int = 0
    max_damage: int = 0
    shooting_range: int = 0
    attack_speed: int = 0
    target_area: TargetAreaTemplate | None = None

    @classmethod
    def from_dict(cls, data: dict) -> RangedWeaponTemplate:
        data = _mapping(data, "rangedWeapon")
        return cls(
            name=_str(data, "name"),
            shooting_vx_name=_str(data, "shootingVX"),
            img_name=_str(data, "imgname"),
            min_damage=_int(data, "minDamage"),
            max_damage=_int(data, "maxDamage"),
            shooting_range=_int(data, "shootingRange"),
            attack_speed=_int(data, "attackSpeed"),
            target_area=_target_area(data),
        )

    @classmethod
    def from_weapon(cls, weapon: WeaponTemplate) -> RangedWeaponTemplate:
        return cls(
            name=weapon.name,
            shooting_vx_name=weapon.shooting_vx,
            img_name=weapon.img_name,
            min_damage=weapon.min_damage,
            max_damage=weapon.max_damage,
            shooting_range=weapon.shooting_range,
            attack_speed=weapon.attack_speed,
            target_area=weapon.target_area,
        )


@dataclass
class MonsterTemplate:
    name: str = ""
    image_name: str = ""
    attributes: AttributesTemplate = field(default_factory=AttributesTemplate)
    armor: ArmorTemplate | None = None
    melee_weapon: MeleeWeaponTemplate | None = None
    ranged_weapon: RangedWeaponTemplate | None = None

    @classmethod
    def from_dict(cls, data: dict) -> MonsterTemplate:
        data = _mapping(data, "monster")
        attributes = _optional(data, "attributes")
        armor = _optional(data, "armor")
        melee = _optional(data, "meleeWeapon")
        ranged = _optional(data, "rangedWeapon")
        return cls(
            name=_str(data, "name"),
            image_name=_str(data, "imgname"),
            attributes=(
                AttributesTemplate.from_dict(attributes)
                if attributes is not None
                else AttributesTemplate()
            ),
            armor=ArmorTemplate.from_dict(armor) if armor is not None else None,
            melee_weapon=MeleeWeaponTemplate.from_dict(melee) if melee is not None else None,
            ranged_weapon=RangedWeaponTemplate.from_dict(ranged) if ranged is not None else None,
        )


@dataclass
class ConsumableTemplate:
    name: str = ""
    img_name: str = ""
    attack_bonus: int = 0
    max_health: int = 0
    current_health: int = 0
    base_armor_class: int = 0
    base_protection: int = 0
    base_movement_speed: int = 0
    base_dodge_chance: float = 0.0
    duration: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> ConsumableTemplate:
        data = _mapping(data, "consumable")
        return cls(
            name=_str(data, "name"),
            img_name=_str(data, "imgname"),
            attack_bonus=_int(data, "attackBonus"),
            max_health=_int(data, "maxHealth"),
            current_health=_int(data, "currentHealth"),
            base_armor_class=_int(data, "baseArmorClass"),
            base_protection=_int(data, "baseProtection"),
            base_movement_speed=_int(data, "baseMovementSpeed"),
            base_dodge_chance=_float(data, "baseDodgeChance"),
            duration=_int(data, "duration"),
        )

    def to_attributes(self) -> Attributes:
        """The attribute modifier the consumable applies."""
        return Attributes(
            max_health=self.max_health,
            current_health=self.current_health,
            attack_bonus=self.attack_bonus,
            base_armor_class=self.base_armor_class,
            base_protection=self.base_protection,
            base_dodge_chance=self.base_dodge_chance,
            base_movement_speed=self.base_movement_speed,
        )


@dataclass
class CreatureModifierTemplate:
    name: str = ""
    attack_bonus: int = 0
    max_health: int = 0
    current_health: int = 0
    base_armor_class: int = 0
    base_protection: int = 0
    base_movement_speed: int = 0
    base_dodge_chance: float = 0.0
    damage_bonus: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> CreatureModifierTemplate:
        data = _mapping(data, "creature modifier")
        return cls(
            name=_str(data, "name"),
            attack_bonus=_int(data, "attackBonus"),
            max_health=_int(data, "maxHealth"),
            current_health=_int(data, "currentHealth"),
            base_armor_class=_int(data, "baseArmorClass"),
            base_protection=_int(data, "baseProtection"),
            base_movement_speed=_int(data, "baseMovementSpeed"),
            base_dodge_chance=_float(data, "baseDodgeChance"),
            damage_bonus=_int(data, "damagebonus"),
        )


def _load(path: str | Path) -> dict:
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at the top level")
    return data


def _records(data: dict, key: str) -> list:
    records = _field(data, key)
    if records is None:
        return []
    if not isinstance(records, list):
        raise TypeError(f"{key!r} must be a JSON array")
    return records


@dataclass
class TemplateLibrary:
    """Every template read from the game data files, in file order."""

    monsters: list[MonsterTemplate] = field(default_factory=list)
    melee_weapons: list[MeleeWeaponTemplate] = field(default_factory=list)
    ranged_weapons: list[RangedWeaponTemplate] = field(default_factory=list)
    consumables: list[ConsumableTemplate] = field(default_factory=list)
    creature_modifiers: list[CreatureModifierTemplate] = field(default_factory=list)

    def read_monsters(self, path: str | Path) -> None:
        data = _load(path)
        self.monsters.extend(MonsterTemplate.from_dict(m) for m in _records(data, "monsters"))

    def read_weapons(self, path: str | Path) -> None:
        """Sort weapons into melee and ranged; entries of any other type are skipped."""
        data = _load(path)
        for record in _records(data, "weapons"):
            weapon = WeaponTemplate.from_dict(record)
            if weapon.type == "MeleeWeapon":
                self.melee_weapons.append(MeleeWeaponTemplate.from_weapon(weapon))
            elif weapon.type == "RangedWeapon":
                self.ranged_weapons.append(RangedWeaponTemplate.from_weapon(weapon))

    def read_consumables(self, path: str | Path) -> None:
        """Read consumables; the stored templates do not keep an attack bonus."""
        data = _load(path)
        self.consumables.extend(
            replace(ConsumableTemplate.from_dict(c), attack_bonus=0)
            for c in _records(data, "Consumables")
        )

    def read_creature_modifiers(self, path: str | Path) -> None:
        data = _load(path)
        self.creature_modifiers.extend(
            CreatureModifierTemplate.from_dict(c) for c in _records(data, "CreatureMods")
        )


def read_game_data(directory: str | Path = Path("../assets/gamedata")) -> TemplateLibrary:
    """Read the four game data files from a directory into a new library."""
    directory = Path(directory)
    library = TemplateLibrary()
    library.read_monsters(directory / "monsterdata.json")
    library.read_weapons(directory / "weapondata.json")
    library.read_consumables(directory / "consumabledata.json")
    library.read_creature_modifiers(directory / "creaturemodifiers.json")
    return library