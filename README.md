# mcg_visual

A small model of a visual card game. Cards take their faces from a
directory of images. Fields lay the cards out as a stack or as a
horizontal hand. An application switches by name between a set of
screens: the main menu, game setup, the game table and two
drag-and-drop test screens.

The package holds the game's state and rules. A front end that drives
it does the drawing.

## Modules

- `mcg_visual.geometry`: `Vec2`, which supports addition, subtraction,
  scaling and negation, and `Rect` (`from_min_size`, `contains`, `left`,
  `right`, `top`, `bottom`, `size`).
- `mcg_visual.card`
  - `SimpleCard` is a card that is either open (`SimpleCard.opened(t)`)
    or masked (`SimpleCard.masked(t=None)`). It has `t()`,
    `is_masked()`, `is_open()`, `mask()` and `open()`. An open card
    needs a type, and types must not be negative.
  - `CardImage` is an image URI with a `calc_size` that fits the image
    into a given box, keeping its aspect ratio by default.
  - `CardConfig` is the interface for a set of card types.
  - `DirectoryCardType` is a `CardConfig` built from a directory of
    image files. The type order is the sorted order of the file names.
    `from_file_listing` builds it from `(name, path, mime type)` entries
    and keeps only the entries whose mime type starts with `image`.
    `type_count()` gives the number of images, `width_bits()` the bits
    needed to encode a type, and `img(card)` the image for a card.
    Images are addressed under `http://127.0.0.1:8080/media/<path>/`.
- `mcg_visual.field`
  - `SimpleField` is a stack or horizontal row (`SimpleFieldKind`) of
    cards.
  - It edits its cards with `push`, `pop`, `remove` and `insert`. An
    index past the end of `insert` appends.
  - It lays them out with `card_size`, `content_size`, `card_pos`,
    `horizontal_drag_size` and `selection_at`.
  - It records drag and drop with `record_drag`, `record_drop` and
    `take_payload`, which returns the notes and clears them.
  - `with_max_card_size` scales the cards to fit a box and returns the
    field.
  - `DNDSelector` names a slot: `player(player, index)`, `stack()` or
    `index(index)`.
- `mcg_visual.example`: a conventional 52-card deck. It has `Suit` and
  `Rank` with `from_index`, and `ConventionalCard` with `all_cards`,
  `new_random` and `img_path`. It also has simple `Stack` and
  `HandLayout` layouts.
- `mcg_visual.screen`: the screens, each a `ScreenWidget` whose
  `update(navigator)` runs one frame and returns the lines of text it
  shows.
  - `MainMenu.press(button, navigator)` switches to the screen that the
    button names.
  - `GameSetupScreen` holds the chosen `CardConfig` and the number of
    players, which starts at 2 and cannot go below 1.
    `generate_config()` pushes every card type onto a stack and deals
    the types round-robin to the players. `start_game` hands the
    resulting `GameConfig` to its game screen and switches to that
    screen.
  - `GameConfig.move_card(src, dst)` moves a card between two
    `DNDSelector` slots.
  - `Game` shows the table and lets you choose an image and a player.
  - `DNDTest` reorders text items between columns with `move_item`.
  - `CardsTestDND` collects the drag and drop notes from the stack and
    the first two players and moves the card once both ends are known.
- `mcg_visual.app`: `App` keeps the registered screens and runs the
  current one. `ScreenExistsError` is raised when a name is registered
  twice. `log` prints a line of diagnostic output.

## Example

```python
from mcg_visual.app import App, ScreenExistsError
from mcg_visual.screen import DNDTest

app = App()
app.register_screen("dnd_test", DNDTest())

try:
    app.register_screen("dnd_test", DNDTest())
except ScreenExistsError:
    pass  # each name can be registered once

app.update()  # runs one frame of the current screen
print(app.current_screen())  # "main"
```

The application starts on the screen named `"main"`. A screen switches
to another by setting `navigator.current`. If that name is not
registered, the main screen runs instead.

## What it does not do

- There is no window, no rendering and no command to start a game. A
  front end has to call `update` and act on what the screens return.
- The package does not pick directories or read image files. A
  `DirectoryCardType` is built from a file listing that you supply.
- There is no settings screen. The main menu's "Settings" button sets
  the name `"settings"`, and unless you register a screen under that
  name, the main screen keeps running.

## Tests

The test suite uses pytest. Install the package with its `test` extra
to get it.