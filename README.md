# brickquest

A small side-scrolling platform game. Run through a level, jump on enemies,
collect coins, knock question blocks from below and reach the flag.

## Installing

```
pip install .
```

This pulls in `pygame`, which the game uses for its window, input, images and
text.

## Playing

```
brickquest --assets path/to/assets
```

`--assets` names the directory holding the images and fonts; it defaults to
`assets` in the current directory. The window is 800×600.

The game opens on a start screen; click **INIZIA** to begin. The on-screen
text is in Italian.

Controls:

- **Left / Right arrows**: walk
- **Up arrow**: jump (only when standing on something)

Walking into an enemy ends the game; landing on one from above defeats it and
bounces you up. Falling below the bottom of the view ends the game as well.
Touching the flag wins the level. From the victory screen you can continue to
the next level (**CONTINUA**), retry the current one (**RIPROVA**) or go back
to the main menu (**MENU PRINCIPALE**). Clearing the last level shows the
final victory screen. The game over screen offers retry and menu.

## Assets

The package ships no images or fonts. The assets directory must hold:

- `images/Map/TestMap.png`, `images/Map/Level1.png`: the two levels, played
  in that order
- `images/Landscape/`: `Block.png`, `FloorBlock.png`, `StairBlock.png`,
  `Bush.png`, `Cloud.png`, `Hill.png`, `Flag.png`
- `images/Coin/Coin1.png` … `Coin10.png`
- `images/QuestionBlock/QuestionBlock1.png` … `QuestionBlock5.png`
- `images/Enemy/`: `GoombaWalk1.png`, `GoombaWalk2.png`, `GoombaDeath.png`
- `images/Mario/`: `MarioWalk1.png`, `MarioWalk2.png`, `MarioWalk3.png`,
  `MarioIdle.png`, `MarioJump.png`, `MarioDeath.png`
- `fonts/mario.ttf`, `fonts/mario2.TTF`

A missing image raises `brickquest.textures.TextureError`, a missing font
`brickquest.ui.state.FontError`, and a map that cannot be read
`brickquest.level.LevelError`.

## Levels

Each level is a small image. Every fully opaque pixel is one 30×30 tile of
the world, and its colour picks what goes there:

| Colour (R, G, B)   | Tile                        |
|--------------------|-----------------------------|
| 255, 0, 0          | player start                |
| 0, 0, 0            | floor block                 |
| 80, 40, 10         | stair block                 |
| 128, 64, 0         | brick block                 |
| 255, 165, 0        | question block              |
| 255, 255, 255      | hidden question block       |
| 255, 255, 0        | coin                        |
| 128, 128, 128      | cloud                       |
| 144, 238, 144      | bush                        |
| 0, 100, 0          | hill                        |
| 255, 215, 0        | flag                        |
| 139, 69, 19        | enemy                       |

Any other colour, or a pixel that is not fully opaque, is empty sky. Floor,
stair and brick blocks are solid; question blocks are solid once visible, and
hitting one from below releases a coin into the cell above it.

## Using the pieces

The game logic runs without a window, so it can be driven from code and
tested:

- `brickquest.level.Level.build(image, textures=None)` builds the tile grid
  from a `pygame.Surface` and returns a `LevelSpawn` with the player and
  enemy start positions; `Level.load(path, textures=None)` does the same from
  a file.
- `brickquest.collision.Collision(level).check(x, y, width, height,
  vertical_velocity)` tests a box against the grid and returns a
  `CollisionResult` (`collided`, `grounded`); coins it touches are removed and
  counted in `Collision.coins`.
- `brickquest.mario.Mario` and `brickquest.goomba.Goomba` move through the
  level; `Mario.update(delta_time, controls)` takes a
  `brickquest.mario.Controls(left, right, up)` value.
- `brickquest.camera.Camera.update_view(view, window_size, target_rect,
  level)` keeps a `brickquest.geometry.View` on the target inside the level.
- `brickquest.game.Game.step(delta_time, controls, mouse_pos, pressed)`
  advances the whole game by one frame; without a surface it updates without
  drawing. `Game.run()` runs the interactive loop on a surface.

Textures are optional everywhere except when drawing: pass a
`brickquest.textures.TextureManager` to load them.

## What it does not do

There is no sound, no saved scores or progress, and no level editor; levels
are the image files above, and the list of levels is fixed.

## Tests

```
pip install .[test]
pytest
```