# motscore

Tools for scoring multi-object trackers on data in the MOTChallenge format.
Pure Python, no third-party dependencies.

- `motscore.accumulator` matches ground-truth boxes to hypothesis boxes frame
  by frame, records matches, misses, false positives and ID switches, and
  computes MOTA and MOTP.
- `motscore.information_file` reads `seqinfo.ini` sequence metadata.
- `motscore.detection_parser` reads detection text files and groups the
  detections by frame.

## Installation

```
pip install .
```

## Accumulating events

Boxes are rows of `x1, y1, x2, y2`. Each call to `MOTAccumulator.update`
handles one frame: pairs with an IoU at or above the threshold are matched
greedily, highest IoU first. Unmatched ground-truth objects become misses and
unmatched hypotheses become false positives. A match for a ground-truth ID
that was last matched to a different hypothesis ID is recorded as a switch.

```python
from motscore.accumulator import MOTAccumulator, MOTEventType

acc = MOTAccumulator()
acc.update(
    1,
    [1, 2],
    [1, 2],
    [[100, 100, 150, 150], [200, 200, 250, 250]],
    [[100, 100, 150, 150], [200, 200, 250, 250]],
    0.5,
)
acc.update(
    2,
    [1, 2],
    [1],
    [[100, 100, 150, 150], [200, 200, 250, 250]],
    [[100, 100, 150, 150]],
    0.5,
)

acc.num_matches()          # 3
acc.num_misses()           # 1
acc.num_false_positives()  # 0
acc.num_switches()         # 0
acc.mota()                 # 1 - (misses + false positives + switches) / ground-truth events
acc.motp()                 # mean IoU of matched and switched pairs
acc.count_events(MOTEventType.MISS)
```

`acc.events()` returns every recorded `MOTEvent` in order; each has `frame`,
`event_type`, `gt_id`, `hyp_id` and `distance` (`1 - IoU` for matched pairs,
`None` otherwise). `num_gt_ids()` and `num_hyp_ids()` count the distinct IDs
seen. With no ground-truth events, `mota()` is `0.0`; with no matched pairs,
`motp()` is `0.0`.

`iou_matrix(gt_boxes, hyp_boxes)` returns the IoU of every ground-truth box
against every hypothesis box as a list of rows.

## Reading sequence information

```python
from motscore.information_file import InformationFile, MetricsError

info = InformationFile("MOT17-02-FRCNN/seqinfo.ini")
length = info.search_int("seqLength")
name = info.search_string("name")
```

`search` returns the trimmed text after `=` on the first line that begins
with the given key and contains `=`. A missing key raises `MetricsError`, as
does a value that `search_int` cannot read as a 32-bit integer.

## Reading detections

Lines have the form `frame,id,bb_left,bb_top,bb_width,bb_height,conf,x,y,z`.

```python
from motscore.detection_parser import DetectionFileParser

parser = DetectionFileParser("MOT17-02-FRCNN/det/det.txt", length)
for frame_detections in parser:
    for det in frame_detections:
        (x1, y1), (x2, y2) = det.points
        conf, _ = det.scores
```

Lines with fewer than seven fields, or a frame number outside
`1..num_frames`, are skipped. Box fields that cannot be read count as `0.0`;
an unreadable confidence counts as `1.0`. `get_detections(i)` returns the
detections of the 0-indexed frame `i` as a tuple, or `None` when `i` is out
of range; `len(parser)` and `parser.num_frames()` give the number of frames.

## What it does not do

- It does not write tracker output files.
- It does not summarise an accumulator into precision, recall or IDF1.
- It does not evaluate a whole sequence from ground-truth and prediction
  files; feed frames to `MOTAccumulator.update` yourself.
- There is no command-line tool.