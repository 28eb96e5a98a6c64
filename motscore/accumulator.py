"""Frame-by-frame accumulation of multi-object tracking events and scores."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

Box = Sequence[float]


class MOTEventType(Enum):
    """Kinds of events recorded while comparing hypotheses to ground truth."""

    MATCH = "match"
    FALSE_POSITIVE = "false_positive"
    MISS = "miss"
    SWITCH = "switch"


@dataclass(frozen=True)
class MOTEvent:
    """A single event observed in one frame."""

    frame: int
    event_type: MOTEventType
    gt_id: int | None = None
    hyp_id: int | None = None
    distance: float | None = None


def _area(box: Box) -> float:
    x1, y1, x2, y2 = box
    return max(0.0, x2 - x1) * max(0.0, y2 - y1)


def _iou(a: Box, b: Box) -> float:
    ax1, ay1, ax2, ay2 = a
    bx1, by1, bx2, by2 = b
    inter_w = max(0.0, min(ax2, bx2) - max(ax1, bx1))
    inter_h = max(0.0, min(ay2, by2) - max(ay1, by1))
    intersection = inter_w * inter_h
    union = _area(a) + _area(b) - intersection
    return intersection / union if union > 0 else 0.0


def iou_matrix(gt_boxes: Iterable[Box], hyp_boxes: Iterable[Box]) -> list[list[float]]:
    """Return the IoU of every ground-truth box against every hypothesis box.

    Boxes are given as ``(x1, y1, x2, y2)``; rows follow ``gt_boxes`` and
    columns follow ``hyp_boxes``.
    """
    hyps = [tuple(b) for b in hyp_boxes]
    return [[_iou(tuple(gt), hyp) for hyp in hyps] for gt in gt_boxes]


@dataclass
class MOTAccumulator:
    """Collects tracking results frame by frame and computes MOTA and MOTP."""

    _events: list[MOTEvent] = field(default_factory=list)
    _matches: dict[int, int] = field(default_factory=dict)
    _gt_ids_seen: set[int] = field(default_factory=set)
    _hyp_ids_seen: set[int] = field(default_factory=set)

    def update(
        self,
        frame: int,
        gt_ids: Sequence[int],
        hyp_ids: Sequence[int],
        gt_boxes: Sequence[Box],
        hyp_boxes: Sequence[Box],
        iou_threshold: float,
    ) -> None:
        """Record the events of one frame using greedy IoU matching."""
        self._gt_ids_seen.update(gt_ids)
        self._hyp_ids_seen.update(hyp_ids)

        if not gt_ids:
            self._events.extend(
                MOTEvent(frame, MOTEventType.FALSE_POSITIVE, hyp_id=h) for h in hyp_ids
            )
            return
        if not hyp_ids:
            self._events.extend(
                MOTEvent(frame, MOTEventType.MISS, gt_id=g) for g in gt_ids
            )
            return

        ious = iou_matrix(gt_boxes, hyp_boxes)
        candidates = [
            (value, gi, hi)
            for gi, row in enumerate(ious[: len(gt_ids)])
            for hi, value in enumerate(row[: len(hyp_ids)])
            if value >= iou_threshold
        ]
        candidates.sort(key=lambda item: -item[0])

        matched_gt: set[int] = set()
        matched_hyp: set[int] = set()
        for value, gi, hi in candidates:
            if gi in matched_gt or hi in matched_hyp:
                continue
            matched_gt.add(gi)
            matched_hyp.add(hi)

            gt_id = gt_ids[gi]
            hyp_id = hyp_ids[hi]
            previous = self._matches.get(gt_id)
            event_type = (
                MOTEventType.SWITCH
                if previous is not None and previous != hyp_id
                else MOTEventType.MATCH
            )
            self._matches[gt_id] = hyp_id
            self._events.append(
                MOTEvent(frame, event_type, gt_id=gt_id, hyp_id=hyp_id, distance=1.0 - value)
            )

        self._events.extend(
            MOTEvent(frame, MOTEventType.MISS, gt_id=g)
            for idx, g in enumerate(gt_ids)
            if idx not in matched_gt
        )
        self._events.extend(
            MOTEvent(frame, MOTEventType.FALSE_POSITIVE, hyp_id=h)
            for idx, h in enumerate(hyp_ids)
            if idx not in matched_hyp
        )

    def events(self) -> tuple[MOTEvent, ...]:
        """All events recorded so far, in order."""
        return tuple(self._events)

    def count_events(self, event_type: MOTEventType) -> int:
        """Number of recorded events of the given type."""
        return sum(1 for e in self._events if e.event_type is event_type)

    def num_matches(self) -> int:
        return self.count_events(MOTEventType.MATCH)

    def num_false_positives(self) -> int:
        return self.count_events(MOTEventType.FALSE_POSITIVE)

    def num_misses(self) -> int:
        return self.count_events(MOTEventType.MISS)

    def num_switches(self) -> int:
        return self.count_events(MOTEventType.SWITCH)

    def num_gt_ids(self) -> int:
        """Number of distinct ground-truth ids seen."""
        return len(self._gt_ids_seen)

    def num_hyp_ids(self) -> int:
        """Number of distinct hypothesis ids seen."""
        return len(self._hyp_ids_seen)

    def mota(self) -> float:
        """Multi-object tracking accuracy: 1 - (FN + FP + IDSW) / num_gt."""
        num_gt = sum(1 for e in self._events if e.gt_id is not None)
        if num_gt == 0:
            return 0.0
        errors = self.num_misses() + self.num_false_positives() + self.num_switches()
        return 1.0 - errors / num_gt

    def motp(self) -> float:
        """Multi-object tracking precision: mean IoU over matched pairs."""
        distances = [
            e.distance
            for e in self._events
            if e.event_type in (MOTEventType.MATCH, MOTEventType.SWITCH)
            and e.distance is not None
        ]
        if not distances:
            return 0.0
        return sum(1.0 - d for d in distances) / len(distances)