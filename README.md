# stronghold

A small turn-based kingdom simulation for the terminal. You govern a kingdom
for five seasons. Each season shows a report on the kingdom's population,
army, leadership, economy, bank, resources and map. You pick one action, and
then you answer a random event.

## Installing

```
pip install .
```

## Playing

```
stronghold
```

The command takes no options apart from `--help`. Answers are read from
standard input as whitespace-separated tokens.

Each season offers these actions:

1. Collect taxes
2. Recruit soldiers
3. Train army
4. Build structure on map (a one-character building type such as F=Farm,
   M=Mine, W=Wall or B=Barracks, then the coordinates `x y`; only empty tiles
   of the 5×5 map can be built on)
5. Spend on services
6. Change policy (to "Reformist")
7. Save game
8. Load game
9. Do nothing

Any other answer counts as an invalid choice. After your action the season
runs its course. The population may grow, the army is fed and paid, inflation
and loan interest apply, the treasury is audited, and resources are gathered
and consumed. Then a random event happens and you choose a response:

1. Use funds (repay 100 gold of the loan, at the cost of an outbreak of illness)
2. Ignore (peasants may revolt)
3. Draft citizens

At the end of each season the kingdom's stability is assessed and illness
spreads. After five seasons a final report is printed.

Saving writes `population_data.txt`, `army_data.txt`, `leadership_data.txt`,
`economy_data.txt`, `bank_data.txt`, `resources_data.txt` and `map_data.txt`
into the current directory. Loading reads them back. A part whose file is
missing or unreadable keeps its current state, and an error naming the file
goes to standard error.

If recruiting is attempted when fewer than ten working people remain, the game
stops. The command then prints the error and exits with status 1.

## Using it as a library

Each part of the kingdom is a dataclass that you can drive yourself:
`stronghold.army.Army`, `stronghold.bank.Bank`, `stronghold.economy.Economy`,
`stronghold.leadership.Leadership`, `stronghold.population.Population`,
`stronghold.resources.ResourceManager`, `stronghold.events.EventManager` and
`stronghold.kingdom_map.KingdomMap`.

The actions on these classes return a message string. Actions that cannot be
carried out raise `ValueError`, for example training without enough gold,
spending more than the treasury holds, or building on an occupied tile. Each
class has a `save(path)` method and a `load(path)` class method that returns a
new instance.

`stronghold.game.Kingdom` bundles the parts together:

- `Kingdom.save(directory)` writes the seven save files listed above into
  `directory` and returns their paths. The event manager is not saved.
- `Kingdom.load(directory)` reads those files back and returns the names of
  any that could not be loaded. The parts those files belong to are left
  unchanged.
- `Kingdom.full_report()` returns the combined status text and the map.

`stronghold.game.run_game(input_lines, output, rng, turns)` plays a game
without a terminal and returns the final `Kingdom`. It reads answers from
`input_lines`, writes to the text stream `output`, and draws random numbers
from `rng`. `rng` can be any object with a `randrange(stop)` method, such as a
`random.Random`.

```python
import io
import random

from stronghold.game import run_game

out = io.StringIO()
kingdom = run_game(["9", "2"] * 5, out, random.Random(1), 5)
print(out.getvalue())
print(kingdom.army.strength)
```

## Limitations

The game always lasts a fixed number of seasons (five from the command line).
Losing power or a peasant revolt is reported, but neither ends the game early.
Saves go to fixed file names in the current directory, so only one saved game
is kept at a time.

## Running the tests

```
pip install .[test]
pytest
```