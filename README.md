# widgetlab

widgetlab holds the state, rules and geometry behind a handful of small
interactive widgets. Each module keeps the logic of one widget apart from any
drawing toolkit. You can drive it from a window, a terminal or a test. The
package has no dependencies outside the standard library.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `widgetlab.egg`: egg timer

- `EggTimer` is a dataclass with the fields `boiling`, `progress` and
  `boil_duration`.
  - `toggle(text)` starts or stops the boil. If the egg had already finished,
    progress goes back to zero. It reads the boil time in seconds from `text`
    and stretches it over the progress that is still left.
  - `tick()` moves progress on by one of 25 ticks per second. Progress stops at
    1. The method returns `True` when progress changed. A duration of zero
    finishes at once.
  - `button_label()` returns `"Start"`, `"Stop"` or `"Finished"`.
  - `remaining_text()` returns the seconds left with one decimal, for example
    `"7.4"`, while the egg is boiling. Otherwise it returns `None`.
- `egg_outline(a=110, b=150, d=20, steps=360)` returns `steps + 1` points
  `(x, y)` on an egg-shaped curve, from 0 to 360 degrees inclusive. `steps`
  must be positive.
- `egg_color(progress)` returns the RGBA colour of the egg. It changes from
  pale yellow `(255, 239, 174, 255)` towards red as progress grows.
- `parse_duration(text)` reads a number of seconds. Surrounding whitespace is
  ignored, and text that is not a number gives `0.0`.

### `widgetlab.prompter`: teleprompter

- `read_paragraphs(path)` reads a UTF-8 text file as one paragraph per line.
  It adds ten blank lines at the end, so that the last line can scroll out of
  view.
- `ColorMode` is a frozen dataclass of `background`, `foreground` and
  `focusbar` RGBA colours. The module defines the sets `DARK` and `LIGHT`.
- `Prompter` holds `paragraphs`, `scroll_y`, `focus_bar_y` (default 170),
  `text_width` (550), `font_size` (35), `autoscroll`, `autospeed` (1) and
  `colors` (`DARK`).
  - `scroll(delta)` scrolls by a mouse-wheel delta counted in lines of text.
    The position never goes above the top.
  - `press()` starts or stops autoscrolling.
  - `key(name, shift=False)` applies one key press. With `shift` every step is
    five times larger. The keys are:
    - `Space` starts or stops autoscrolling.
    - `U` and `D` move the focus bar up and down.
    - `K` or `Up`, and `J` or `Down`, scroll by four steps.
    - `PageUp` and `PageDown` scroll by 100 steps. `PageDown` also adds the four
      steps of `Down`.
    - `F` autoscrolls faster. `S` autoscrolls slower and stops it at zero
      speed.
    - `+` and `-` change the font size.
    - `W` and `N` widen or narrow the text by ten steps.
    - `C` switches between dark and light colours.
  - `advance()` moves one autoscroll frame. It returns `True` while
    autoscrolling.
  - `margin_width(window_width)` gives the left and right margins around the
    text column.
  - `focus_bar(window_width)` gives the focus bar as
    `(left, top, right, bottom)`.

### `widgetlab.pivot`: pivot tables of profit and loss

- `Record(row_name, col_name, value)` is one booked value.
- `read_csv(path)` reads records from a CSV file.
  - Blank lines are skipped.
  - Every line must have as many fields as the first one.
  - Only lines of exactly three fields become records.
  - A bad line or a value that is not a number raises `ValueError`.
- `pivot(records)` sums the records into cells and returns a `PivotTable` of
  `rows`, `cols` and `cells`. The table gets a `"Total"` column, a `"Total"`
  row and a grand total. Names keep the order in which they first appear.
- `sort_names(names)` sorts names alphabetically with `"Total"` last.
- `format_value(value)` formats with one decimal and comma thousands
  separators, for example `1,234.6`.
- `cell_color(value)` chooses the text colour of a value: green above zero,
  orange below zero and white at zero. Values smaller than 25 in size get
  alpha 25.
- `init_data(rows, cols)` returns a table of zeros with a `"Total"` row and
  column added.
- `LiveTable(sectors=SECTORS, markets=MARKETS)` is a thread-safe table of
  sector and market values that starts at zero.
  - `simulate(n, rng=None)` books `n + 1` standard normal values to random
    cells and keeps the totals in step.
  - `value(row, col)` reads one cell. An unknown name reads as `0.0`.
  - `snapshot()` returns a copy of all cells.

### `widgetlab.grid`: a square grid of buttons

- `cell_index(row, col, side=8)` gives a cell's position in row-major order.
- `cell_label(row, col)` gives the button text, such as `"R2 C5"`.
- `cell_color(row, col, side=8)` gives the button's RGBA background. Red grows
  down the grid and green grows to the right.

Cells outside the grid raise `IndexError`. A side that is not positive raises
`ValueError`.

### `widgetlab.eclipse`: moons and a moving shadow

`Eclipse` holds the shadow offset `eclipse_x`, `eclipse_y` and the `moon`
colour.

- `click()` cycles the moon through white, blue and cheese yellow.
- `key(name)` moves the shadow with `Up`, `Down`, `Left` and `Right`. It
  returns `True` for `Q` or `Escape`, which ask to quit.
- `scroll(dx, dy)` moves the shadow by a hundredth of the scroll amount.
- `circles()` lists the six `Circle(x, y, radius, color)` values to draw: each
  of the three moons, followed by its shadow.

## Example

    from widgetlab.pivot import Record, format_value, pivot, sort_names

    sort_names(["Total", "Media", "Banks"])   # ['Banks', 'Media', 'Total']
    format_value(1234.56)                     # '1,234.6'

    table = pivot([Record("Banks", "Spain", 10.0), Record("Media", "Spain", -4.0)])
    table.cells["Total"]["Total"]             # 6.0

## Command line

The `widgetlab` command boils one egg in the terminal. It prints the title, the
size of the drawing area and the egg's bounding box. After that it prints one
frame per tick, 25 ticks a second: a progress bar, the percentage and the
button label. It ends when the egg is finished. Ctrl-C stops the boil and
exits with status 130.

    widgetlab --duration 5
    widgetlab --fast --title "Soft boiled" --size 300 500

The options are:

- `--title` sets the title.
- `--size WIDTH HEIGHT` sets the size of the drawing area. The default is
  400 × 600.
- `--duration` sets the boiling time in seconds. The default is 10.
- `--fast` runs the ticks without waiting.

Invalid values exit with status 2. `widgetlab --help` lists the options.

## What it does not do

widgetlab draws nothing and opens no windows. The modules give the state and
geometry for a widget, and a program using them does its own painting and
event handling. The egg timer is the only widget with a command. The
teleprompter, the pivot tables, the button grid and the eclipse are used from
Python only.