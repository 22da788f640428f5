# towerrl

The game logic of a tile-based roguelike, with no rendering or window code.
It provides:

- `towerrl.ecs`: a small entity-component store. `Manager` creates
  components and entities, `build_tag` combines components into a `Tag`, and
  `Manager.query` returns a `QueryResult` for every entity carrying all of a
  tag's components, in creation order.
- `towerrl.coords`: `LogicalPosition` (tiles) and `PixelPosition`, with
  Manhattan and Chebyshev distances; `ScreenData` (default: a 100 x 80 map of
  32-pixel tiles, scale factor 3); `CoordinateManager` for index, tile and
  pixel conversions; a centring `Viewport`; and `DrawableSection`.
- `towerrl.common`: the `Name`, `UserMessage` and `Attributes` components,
  the `Quality` levels, `EntityManager` (a world plus its named tags), and
  helpers such as `get_attributes`, `get_position`, `distance_between` and
  `get_creature_at_position`.
- `towerrl.shapes`: area shapes (`new_circle`, `new_square`,
  `new_rectangle`, `new_line`, `new_cone`) whose sizes are rolled by quality,
  `BaseShape.get_indices` for the tiles they cover, rotation through
  `ShapeDirection`, and `get_line_to`.
- `towerrl.graphics`: `ColorMatrix`, `offset_from_center` and
  `transform_pixel_position` for a view centred on the player.
- `towerrl.gear`:
  - `statuseffects`: `Sticky`, `Burning` and `Freezing` with their
    `CommonItemProperties`;
  - `actions`: `ThrowableAction` and `shape_throwable_action`;
  - `equipment`: `Armor`, `MeleeWeapon` and `RangedWeapon` (damage rolls,
    targets in the weapon's area, quality rolls);
  - `consumables`: potions (`Consumable.create_consumable`) and the per-turn
    effect tracker (`add_effect_to_tracker`, `run_effect_tracker`,
    `update_entity_attributes`);
  - `items`: `Item`, `create_item`, `create_item_with_actions`,
    `kind_of_item` and `item_stats`;
  - `inventory`: `Inventory`, which stacks items of the same name and builds
    `InventoryListEntry` lists filtered by equipment, consumables, effects or
    actions.
- `towerrl.templates`: dataclasses for monster, weapon, consumable and
  creature-modifier templates, `create_target_area`, and `TemplateLibrary` /
  `read_game_data` to load them from JSON.
- `towerrl.player`: `PlayerData` with `PlayerEquipment`, `PlayerThrowable`
  and `InputStates` for equipping, unequipping and preparing throws.
- `towerrl.world`: `initialize_ecs`, which returns an `EntityManager` with
  the `renderables`, `messengers`, `items` and `monsters` tags.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from towerrl.common import Attributes
from towerrl.coords import CoordinateManager, LogicalPosition, ScreenData
from towerrl.gear.inventory import Inventory
from towerrl.gear.items import create_item
from towerrl.gear.statuseffects import Burning
from towerrl.world import initialize_ecs

em = initialize_ecs()

manager = CoordinateManager(ScreenData.default())
index = manager.logical_to_index(LogicalPosition(3, 2))
assert manager.index_to_logical(index) == LogicalPosition(3, 2)

torch = create_item(em.world, "Torch", LogicalPosition(3, 4), Burning(2, 3))
inventory = Inventory()
inventory.add_item(torch)
inventory.add_item(create_item(em.world, "Torch", LogicalPosition(0, 0)))
print(inventory.inventory_for_display())  # one entry, count 2
print(inventory.effect_names(0))          # ['Burning']

attrs = Attributes.base(50, 5, 10, 2, 5, 0.0, 0)
print(attrs.display_string())
```

Game data is read from a directory holding `monsterdata.json`,
`weapondata.json`, `consumabledata.json` and `creaturemodifiers.json`:

```python
from towerrl.templates import read_game_data

library = read_game_data("assets/gamedata")
print(len(library.monsters), len(library.melee_weapons))
```

## What it does not do

This package is a library of game state and rules only. It has no command to
start a game, no game loop, no window, drawing, input handling or visual
effects, and it loads no images. It does not turn templates into entities,
spawn monsters or loot, run combat between creatures, or save games; those
parts are left to the program that uses it.