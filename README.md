# adsort

`adsort` is an interactive command-line tool for browsing a collection of
Super Bowl commercials. It reads the ads from a data file and filters them by
content. It then lists them from most to fewest views. You can choose merge
sort or quick sort for the sorting step, and the tool reports how long that
step took.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
adsort [path/to/super_bowl_ads_updated.json]
```

`python -m adsort.cli` starts the same program.

If you give no path, the tool reads `super_bowl_ads_updated.json` from the
current directory. If the file cannot be opened, the tool prints
`Error: cannot open "<file>"` and a usage line to standard error, then exits
with status 1.

A session goes through these steps, and repeats them until you stop it:

1. **Choose an algorithm.** Enter `1` for merge sort or `2` for quick sort.
   Only the leading number on the line counts, and blank lines are skipped.
2. **Choose content filters.** Enter one or more whole numbers, separated by
   spaces:

   | Number | Content   |
   |--------|-----------|
   | 0      | No filter |
   | 1      | Funny     |
   | 2      | Product   |
   | 3      | Patriotic |
   | 4      | Celebrity |
   | 5      | Danger    |
   | 6      | Animals   |
   | 7      | Sexual    |

   An ad is listed only if it has every kind of content you select. If you
   enter `0`, it must be the last number on the line.
3. **Read the results.** First comes the line
   `Sorted N ads (highest to lowest views) in T microseconds.`. After it comes
   a table of year, brand, views and content for each matching ad, ordered
   from most to fewest views. The content column shows `(none)` when an ad
   has no flags set.
4. **Continue or quit.** A line that starts with `1` begins a new round. A
   line that starts with `0` ends the session.

If an answer is not valid, the tool prints an error to standard error and asks
the question again. The session also ends, with status 0, when standard input
runs out.

## Input format

The loader reads the file line by line and does not parse it as JSON. It
expects each field on its own line, in the form `"Key": value`. It recognises
these keys at the start of a line:

- `Year`, `Views`, `Likes`, `Dislikes`: whole numbers.
- `Brand`, `Title`: quoted strings.
- `Funny`, `Product`, `Patriotic`, `Celebrity`, `Danger`, `Animals`,
  `Sexual`: a flag is set when its line contains `true`.

A `Year` line starts a new ad. A `Title` line completes the current ad and adds
it to the list. All other lines are ignored.

The loader raises `ValueError` when a numeric field does not hold a number, or
when the number falls outside the 32-bit signed range. The command does not
catch this error.

## Library use

- `adsort.ad`:
  - `Ad` is a frozen dataclass with the fields `year`, `brand`, `content`,
    `views`, `likes`, `dislikes` and `title`.
  - `ContentFlags` holds the seven content flags. It provides `has(content)`,
    `matches(wanted)` and `describe()`.
  - `Content` is an enum of the content kinds, numbered as in the menu.
- `adsort.loader`:
  - `parse_ads(lines)` builds ads from an iterable of lines.
  - `load_ads(path)` reads ads from a file.
- `adsort.sorting`:
  - `merge_sort(ads)` returns a new list sorted by views in ascending order.
    Ads with equal views keep their original order.
  - `quick_sort(ads)` returns a new list sorted the same way. It is a
    quicksort that uses the last element as the pivot, and it is not stable.
- `adsort.cli`: holds the steps that the command runs.
  - `parse_algorithm_choice`, `parse_flag_selection` and `parse_continue`
    raise `InvalidSelection`, a subclass of `ValueError`, when an answer is
    not valid.
  - `filter_ads`, `sort_by_views_descending` and `format_table` do the work
    between the prompts.
  - `main(argv=None)` is the entry point.

## What it does not do

`adsort` does not include a data file, and it does not write or change one.
The loader only understands the one-field-per-line layout described above. A
general JSON document laid out any other way will not load correctly.