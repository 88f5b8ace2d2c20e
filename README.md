# firstbreak

Tools for picking seismic first breaks and for reading and writing the plain
text parameter files that go with a 3D land survey. It has no dependencies
outside the standard library.

## What it contains

- `firstbreak.neunet.NeuNet` – a small back-propagation network (3 inputs,
  16 hidden nodes, 1 output). `set_data` loads a trace, `think` scores the
  samples and returns the one with the smallest output, and `learn` adjusts
  the weights until they settle (at most about 1000 passes), then saves them.
  `calculate_peaks` and `nearest_peak` locate negative troughs of the trace.
  The weights live in a text file (`neunet.txt` by default) handled by
  `firstbreak.weights.NetworkWeights`; when the file cannot be read, random
  weights are drawn instead (`seed` makes them repeatable).
- `firstbreak.relation` – a correlation picker: `pick_first_break(group, model)`
  normalizes both series, slides the model along the trace and returns the
  centre of the window with the smallest product sum (0 when the model is not
  shorter than the trace). `Correlator` offers the same step by step.
- `firstbreak.outfbk` – files of `station east north value` lines.
  `read_records` and `write_records` handle a single file; `FirstBreakFile`
  holds a shot and a receiver table, sorts them by station when reading, and
  finds stations with `find_shot` / `find_receiver`.
- `firstbreak.svsys.SurveySystem` – the survey system parameters in
  `svsys1.par` (area, crew and common numbers) and `svsys2.par` (50 receiver
  line intervals and 50 shot point intervals), with `calculate` deriving line
  and shot point positions and total widths.
- `firstbreak.p190.P190Survey` – shot and receiver coordinates plus the
  receiver ranges of each shot, with station lookup, `shot_position`,
  `receiver_positions` and `write_shot_parameters` to export a shot point
  parameter file.
- `firstbreak.spp` – the `ShotPoint` record and shot point parameter files:
  `read_shot_points` (returns records sorted by station), `count_shot_points`,
  `write_shot_points`, `sort_shot_points`, `find_shot_point`.
- `firstbreak.shotpoints` – `ShotPointTable`, the shot points of one swath
  bound to their file, which merges a station file
  (`add_stations_from_file`), file numbers, skipped shots (file number -1),
  offsets and trace ranges. Each `apply_*` method returns the stations not
  found in the table; `save_not_found` writes them to a file.
  `swath_file_name(3)` gives `SWATH3.SPP`.

## Install

```
pip install .
```

## Example

```python
from firstbreak.relation import pick_first_break
from firstbreak.shotpoints import ShotPointTable, save_not_found

index = pick_first_break(trace_samples, wavelet)

table = ShotPointTable("SWATH3.SPP")
table.load()
missing = table.apply_file_numbers("SWATH3.FN")
save_not_found(missing, "NotFndFn.TXT")
table.save()
```

Problems found in input files raise exceptions (`ShotPointError`,
`ValueError`, `FileNotFoundError`); every function takes explicit file paths.

## What it does not do

There is no command-line program, no graphical editor or map display, and no
reading of trace data from seismic files: traces are passed in as sequences of
numbers. Station numbers are not generated from survey parameters, and shot
coordinates are not merged into a `ShotPointTable`; they must come from files
or be set directly.

## Tests

```
pip install .[test]
pytest
```