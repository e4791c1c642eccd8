# snakegrid

A classic snake game on a 20-pixel grid in an 800×600 window. Steer the
snake around the walls and eat apples to grow. The game keeps your best
score between runs.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses for the window, drawing, fonts
and sound.

## Playing

Start the game from the directory that holds its images, sounds and font:

```
snakegrid
```

The command has no options apart from `--help`.

The main menu has three entries. Move the mouse over an entry to highlight
it, then click it:

- **PLAY** starts a round.
- **HOW TO PLAY** shows the instructions picture.
- **EXIT** closes the game. Closing the window does the same.

The music button in the top-left corner turns the background music on and
off. When music is off, the eating and collision sounds are muted as well.

### During a round

- The arrow keys steer the snake. It cannot turn straight back on itself.
- Escape ends the round.

The snake moves one cell every 70 ms. The round ends when the snake hits the
outer border, one of the four L-shaped walls in the middle of the field, or
its own body. Each apple adds one point. The snake grows by one cell for each
apple. The current score and the high score are shown below the field.
Whenever you beat your high score, the new score is written to
`highscore.txt` in the current directory straight away.

When the round is over, "GAME OVER" is shown with a back button in the
top-left corner. Click the button to return to the menu. The instructions
screen has the same back button.

The snake, the apples and the walls are drawn as plain coloured squares. The
only pictures the game uses are the menu background, logo and buttons, and
the instructions screen.

## Assets

The game looks for these files in the working directory:

- Images: `background_snake.jpg`, `logosnake.png`, `HUONGDAN.png`,
  `back.jpg`, `musicon.png`, `musicoff.png`
- Font: `arial.ttf`
- Sounds: `music_snake.mp3`, `snake_eating.wav`, `snake_collision.mp3`

If an image or sound cannot be loaded, the error is logged and the game goes
on without it. A missing back-button image is drawn as an outlined square
instead. The font is required: if it cannot be loaded,
`snakegrid.graphics.GraphicsError` is raised.

## Using the parts on their own

`snakegrid.logic.Logic` holds all the game state. It does not need a window,
which makes it easy to drive from tests or from another front end:

```python
import random
from snakegrid.logic import Logic, Direction

game = Logic("highscore.txt", random.Random(0))
game.turn(Direction.UP)       # True: the snake was heading right
game.move_snake()
print(game.head, game.tail_bite(), game.impact(0, 0))
```

The main parts of `Logic`:

- `segments`: a list of `Cell(x, y)`, with the head first.
- `direction`: a `Direction`.
- `apple`: a `Cell`, or `None` before the first apple is placed.
- `score`, `high_score` and `running`.
- `run_logic(now, events)`: takes one step once 70 ms have passed since the
  last step. `now` is in milliseconds, and the first call only starts the
  clock. Returns whether a step was taken.
- `generate_apple()`: places a new apple and returns it.
- `handle_events(events)`: applies arrow keys, Escape and quit events.
- `on_eat`: an optional callback that runs each time an apple is eaten.

`snakegrid.graphics.Graphics` and `snakegrid.music.Music` wrap the pygame
window and the audio device. Both can be used as context managers.
`snakegrid.menu.Menu` puts everything together. `snakegrid.menu.main` is the
function behind the `snakegrid` command.

## Running the tests

```
pip install .[test]
pytest
```