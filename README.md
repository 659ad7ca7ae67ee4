# seabattle

A single-player sea battle game. You set up a rectangular field, pick how
many ships of each length (1 to 4) you want and place them. Then you shoot at
that same field until every ship has sunk. Sinking a ship gives you a random
ability.

There are two ways to play: a pygame window (`seabattle`) and a text mode in
the terminal (`seabattle-cli`).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

### Window mode

```
seabattle
```

This opens a 1600×900 window titled "Battlefield 0" that runs at 60 frames a
second. Text uses `assets/fonts/font.ttf` if that file exists relative to the
current directory. Otherwise it uses pygame's default font.

The screens are these:

- **Menu**: Up and Down move the selection and Enter chooses. "Start Game" goes to the field screen and "Exit" closes the window. The middle item, "um", does nothing.
- **Create field**: the arrow keys change the width (Left/Right) and the height (Up/Down). Each side stays between 5 and 30, and the field starts at 10 × 10. Enter creates the field and moves on. Escape resets the field to 10 × 10 and returns to the menu.
- **Create ships**: Up and Down select a ship length. `+` or `=` (or keypad plus) adds a ship of that length, and `-` (or keypad minus) removes one. Each count stays between 0 and 10. The starting counts are 4 ships of length 1, 3 of length 2, 2 of length 3 and 1 of length 4. Enter builds the fleet, longest ships first. Escape empties the fleet and returns to the field screen.
- **Placing ships**: the ships are placed one at a time, longest first. Move the cursor with the arrow keys or the mouse, and press R to switch between vertical and horizontal. Enter or a left click places the ship. If a ship cannot go where you put it, the reason is shown. Escape clears the field and returns to the ship screen. Once every ship is placed, the attack screen opens.
- **Attacking**: move the cursor with the arrow keys or the mouse. Enter or a left click fires at the cell. E uses the next ability in the queue. When no ship is left afloat, the game returns to the menu.

Cell colours on the attack screen:

| Colour | Meaning |
|---|---|
| cyan | not yet shot at |
| white | revealed as empty |
| blue | ship segment, intact |
| yellow | ship segment, damaged |
| red | ship segment, destroyed |

### Terminal mode

```
seabattle-cli
```

The game reads whitespace-separated integers from standard input and proceeds in this order:

1. It asks for the field size as width and height, each from 1 to 100.
2. It asks for the number of ships of lengths 4, 3, 2 and 1, at most 100 of each.
3. It asks for the bottom-left corner of every ship, and for ships longer than 1 the orientation (0 horizontal, 1 vertical).
4. It asks for attack coordinates until every ship has sunk.

After each ship is placed, the game prints the field with ships marked `P`. Once placement is done, it prints the field with each segment's state value, where `2` means intact. After each shot it prints the field as the attacker sees it:

- `.` is a cell not yet shot at.
- `O` is a cell revealed as empty.
- `/` is a hit segment that is not yet destroyed.
- `X` is a destroyed segment.

After the field it prints the number of ships still afloat.

If the input is invalid, the game prints a message and asks again. If the input ends, the command exits with status 1.

## Rules

- Coordinate `(0, 0)` is the bottom-left corner of the field. Ships extend to the right (horizontal) or upward (vertical) from the given cell.
- Ships may not touch each other, not even at a corner, and may not stick out of the field.
- Every ship segment has 2 hit points, and a normal shot deals 1 damage.
- A segment whose hit points reach 0 is destroyed. Shooting a destroyed segment has no effect.
- A ship is sunk once all of its segments are destroyed. When a ship sinks, the cells around it are revealed.

## Abilities

Abilities are only available in window mode. You start with one of each
ability, shuffled into a queue. Each ship you sink adds a random ability to the
end of the queue. E always uses the ability at the front of the queue.

- **Double damage**: your next shot deals double damage.
- **Scanner**: the first E press arms the scanner, and a second E press disarms it without using it. While it is armed, the selection box covers 2×2 cells, and the next Enter or click scans instead of firing. The scan reports whether any ship lies in the 2×2 square whose corner is the selected cell.
- **Bombard**: deals 1 damage to a random ship segment that has not been destroyed. The cell it hits is not revealed.

When the queue is empty, E shows "No abilities available".

## Using it as a library

The game logic lives in plain classes:

- `seabattle.ship.Ship`
- `seabattle.ship_manager.ShipManager`
- `seabattle.ship_field.ShipField`
- `seabattle.abilities.AbilityManager`
- `seabattle.player.Player`

The enumerations are in `seabattle.enums`.

```python
from seabattle.enums import ShipOrientation
from seabattle.player import Player

player = Player()                      # 10 x 10 field, empty fleet
player.create_field(10, 10)
player.create_ship_manager([4, 3, 2, 1])
player.place_ship_by_index(0, 0, 0, ShipOrientation.HORIZONTAL)
player.attack(player, 0, 0)            # damage=1, expose_cell=True
print(player.field.segment_state(0, 0))  # ShipSegmentState.DAMAGED
print(player.alive_count())              # 4
```

`ShipField.attack(x, y, expose_cell=True, damage=1)` returns `True` when the
shot sinks a ship. `Player` and `AbilityManager` accept a `random.Random` so
that the ability queue and bombard targets can be reproduced.

`seabattle.cli.run_cli(stdin, stdout)` plays a whole terminal game on any text
streams, such as `io.StringIO`. `seabattle.app.GameGui.step(events)` advances
the window game by one frame for a list of pygame events.

Errors are raised as exceptions:

| Exception | Raised when |
|---|---|
| `ValueError` | invalid sizes, invalid coordinates, or a ship that cannot be placed |
| `IndexError` | a ship or segment index is out of range |
| `LookupError` | asking for the segment state of a cell without a ship |
| `seabattle.exceptions.OutOfBoundsAttackError` | a shot falls outside the field |
| `seabattle.exceptions.NoAbilityAvailableError` | an ability is requested while the queue is empty |

Both game exceptions derive from `seabattle.exceptions.GameError`.

## What it does not do

- There is no computer opponent and no second player. You always shoot at the fleet you placed yourself.
- Games cannot be saved or loaded.
- The terminal mode has no abilities.