# hexbench

A bundle of four small command-line tools.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Commands

### hello

Greets a name. The greeting can be uppercased and repeated.

    hello                     # Hello, World!
    hello Alice --upper       # HELLO, ALICE!
    hello Bob --repeat 3

`--repeat` takes a positive integer. An unknown option or a bad value exits
with status 2.

### wordfreq

Counts how often each word appears in the text given as arguments. When no
text is given, it reads standard input.

    wordfreq "the cat and the hat"
    cat notes.txt | wordfreq --top 5 --min-length 3 --ignore-case

A word is a run of letters and digits. The most frequent words come first,
and words with the same count are sorted alphabetically. Counts are printed
with thousands separators. When the limit is the default of 10, the header
reads `Word frequency:`. Otherwise it reads `Top N words:`.

### hextool

Reads and writes binary files in hexadecimal.

    hextool --file data.bin --read --offset 0x10 --size 64
    hextool --file data.bin --write 48656c6c6f --offset 0x100

Offsets can be decimal or hexadecimal with a `0x` prefix.

- Reading prints a hex dump of 16 bytes per line with an ASCII column. It reads 256 bytes unless `--size` says otherwise.
- Writing creates the file if it is missing. It overwrites bytes in place and does not truncate the file.

### hexpath

Finds minimum and maximum cost paths through a grid of hexadecimal cells.
Each cell holds a value from `00` to `FF`, and cells are separated by spaces.
Paths run from the top-left corner to the bottom-right corner and move up,
down, left or right.

    hexpath map.txt
    hexpath map.txt --visualize
    hexpath map.txt --animate
    hexpath --generate 8x4 --output map.txt

- `--visualize` prints colour-coded grids with each path highlighted.
- `--animate` shows the minimum-cost search one step at a time.
- `--generate WIDTHxHEIGHT` makes a random grid with `00` at the start and `FF` at the end. `--output` saves that grid to a file.

## Library use

The modules can also be used directly:

    from hexbench.hextool import hex_dump, hex_to_bytes
    from hexbench.wordfreq import count_words, report
    from hexbench.hexpath import parse_map_text, dijkstra_min, dijkstra_max

    grid = parse_map_text("00 10\n20 FF\n")
    result = dijkstra_min(grid)
    print(result.path, result.total_cost)

## What it does not do

There is no chat or networking tool. None of the commands open network
connections, exchange keys or encrypt anything.