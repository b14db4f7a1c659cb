# cubscene

Read and validate `.cub` scene files: the small text format that describes
the wall textures, floor and ceiling colours and the grid map of a
ray-casting game.

## The format

A scene file starts with six configuration lines, in any order, optionally
separated by blank lines:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

Each line is a key, then whitespace, then a value running to the end of the
line (trailing spaces and tabs are dropped). An unknown key, a key without a
value, or a key given twice is an error.

Every line after the sixth key has been read belongs to the map. The map may
contain only spaces, tabs, `0` (floor), `1` (wall) and exactly one player
start, `N`, `S`, `E` or `W`, giving the direction the player faces. Each
floor cell must have a `0`, `1` or player cell directly to its left, right,
above and below; the player must have a `0` or `1` on all four sides. Blank
lines before the map are allowed, but once a map row has been seen, a blank
line may only be followed by more blank lines.

```
111111
100101
10N001
111111
```

## Command line

Installing the package provides the `cubscene` command:

```
cubscene maps/level1.cub
```

If the file passes every check, a summary of the parsed scene is printed
(each raw map row with its length, the map height and width, the four
texture paths, the raw and decoded colours and the player's direction) and
the exit status is 0. If a check fails, `Error: ` and the reason are printed,
followed by `error ❌`, and the exit status is 2. Calling it with anything
other than exactly one argument prints `Error: Wrong argument count` and
exits with status 3.

The checks run in this order:

1. the file name ends in `.cub` and the file can be opened;
2. the configuration lines are well formed and no key repeats;
3. the map is present, holds only allowed characters and exactly one player,
   has no blank line inside it, and is closed;
4. each texture path is a single word and names a readable file;
5. both colours are exactly three comma-separated integers from 0 to 255.

## Library use

```python
from cubscene.scene import SceneData, read_scene, ParseError
from cubscene.mapcheck import check_map
from cubscene.textures import check_textures
from cubscene.colors import check_colors

data = SceneData()
try:
    read_scene("maps/level1.cub", data)
    check_map(data)
    check_textures(data)
    check_colors(data)
except ParseError as exc:
    print("invalid scene:", exc)
else:
    print(data.player_dir, data.map_height, data.map_width)
    print(data.floor_rgb, data.ceiling_rgb)
```

`SceneData` holds the texture paths (`no`, `so`, `we`, `ea`), the raw colour
strings (`floor`, `ceiling`), their decoded `floor_rgb` and `ceiling_rgb`
tuples, the map rows (`map`, each row kept exactly as read, including its
newline), `map_height`, `map_width` (the longest row, newline included) and
`player_dir`. Every check raises `ParseError` on the first problem it finds.

`cubscene.cli.parse_check(path, data)` runs the whole sequence in one call
and returns the filled `SceneData`; `cubscene.cli.format_summary(data)`
returns the summary text the command prints. Helpers for the pieces of the
format live in `cubscene.textutils` (`split_fields`, `tokenize`,
`parse_int`, `word_count`, `is_empty_line`, `is_spaces_only`),
`cubscene.colors` (`valid_rgb`, `parse_rgb`, `is_valid_number`, `set_rgb`),
`cubscene.textures` (`has_extension`, `is_readable`) and
`cubscene.mapcheck` (`check_invalid_chars`, `check_player_count`,
`check_inner_empty_lines`, `map_is_closed`).

## What it does not do

The package only reads and validates scene files. It does not load or
decode the texture images (it only checks that each path can be opened),
and it does not render or play the scene.

## Running the tests

```
pip install -e ".[test]"
pytest
```