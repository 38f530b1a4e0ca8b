# sorting.py
# ------------------------------------------------------------
# In-place comparison sorts used by the benchmark harness.
# Selection, Insertion, Bubble and Merge, plus two Heap Sort
# variants that differ only in how the max-heap is built.
# Every routine mutates the list it gets and returns None.
# ------------------------------------------------------------

from typing import Callable, Dict, List, Optional


# =========================
# Binary max-heap (array view)
# =========================
def parent_index(k: int) -> Optional[int]:
    """Parent of node k, or None for the top of the heap."""
    if k == 0:
        return None
    return (k - 1) // 2


def sift_up(a: List, idx: int) -> None:
    """
    Moves a[idx] up while it is bigger than its parent.
    Used after appending one element to the end of the heap region.
    """
    while idx > 0:
        parent = (idx - 1) // 2
        if a[parent] < a[idx]:
            a[parent], a[idx] = a[idx], a[parent]
            idx = parent
        else:
            return


def sift_down(a: List, top: int, end: int) -> None:
    """
    Pushes a[top] down inside the heap region a[:end].
    The bigger child wins; when both children are equal the left one is used.
    """
    while True:
        left = top * 2 + 1
        right = left + 1
        if left >= end:
            return
        child = left
        if right < end and a[right] > a[left]:
            child = right
        if a[child] > a[top]:
            a[top], a[child] = a[child], a[top]
            top = child
        else:
            return


def heapify_sift_up(a: List) -> None:
    """Builds the heap by growing it one element at a time (O(n log n))."""
    for idx in range(1, len(a)):
        sift_up(a, idx)


def heapify_sift_down(a: List) -> None:
    """Floyd's construction: sift down every internal node, last one first (O(n))."""
    n = len(a)
    if n < 2:
        return
    for idx in range(parent_index(n - 1), -1, -1):
        sift_down(a, idx, n)


def heap_sort(a: List) -> None:
    """
    Sorts a list that already holds a valid max-heap.
    The root goes to the end of the region, the region shrinks, repeat.
    """
    end = len(a)
    while end > 1:
        a[0], a[end - 1] = a[end - 1], a[0]
        end -= 1
        sift_down(a, 0, end)


def is_max_heap(a: List, top: int = 0) -> bool:
    """Recursive check of the max-heap property below `top`."""
    for child in (top * 2 + 1, top * 2 + 2):
        if child < len(a) and (a[child] > a[top] or not is_max_heap(a, child)):
            return False
    return True


# =========================
# Sorting algorithms
# =========================
def selection_sort(a: List) -> None:
    """
    Selection Sort (O(n^2) comparisons, O(n) swaps).
    Moves the max of the unsorted prefix to its end on every pass.
    """
    for last in range(len(a) - 1, 0, -1):
        max_idx = 0
        for i in range(1, last + 1):
            if a[max_idx] < a[i]:
                max_idx = i
        a[max_idx], a[last] = a[last], a[max_idx]


def insertion_sort(a: List) -> None:
    """
    Insertion Sort (O(n^2), O(n) on nearly sorted input).
    Finds the slot first, then rotates the gap in one go.
    """
    for i in range(1, len(a)):
        j = i
        while j > 0 and a[i] < a[j - 1]:
            j -= 1
        if j != i:
            a.insert(j, a.pop(i))


def bubble_sort(a: List) -> None:
    """
    Bubble Sort (O(n^2)). Early-stops if a pass makes no swap,
    so sorted input costs a single pass.
    """
    n = len(a)
    for i in range(n):
        swapped = False
        for j in range(0, n - i - 1):
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                swapped = True
        if not swapped:
            break


def merge_sort(a: List) -> None:
    """
    Recursive Merge Sort (O(n log n)), in place on index ranges.
    One scratch buffer is shared by the whole recursion.
    """
    buff: List = []
    _merge_sort(a, 0, len(a), buff)


def _merge_sort(a: List, lo: int, hi: int, buff: List) -> None:
    n = hi - lo
    if n < 2:
        return
    if n == 2:
        if a[lo] > a[lo + 1]:
            a[lo], a[lo + 1] = a[lo + 1], a[lo]
        return
    mid = lo + n // 2
    _merge_sort(a, lo, mid, buff)
    _merge_sort(a, mid, hi, buff)
    _merge(a, lo, mid, hi, buff)
    a[lo:hi] = buff
    buff.clear()


def _merge(a: List, lo: int, mid: int, hi: int, buff: List) -> None:
    """
    Merge step used by merge_sort. Left half wins ties.
    """
    i, j = lo, mid
    while i < mid and j < hi:
        if a[j] < a[i]:
            buff.append(a[j]); j += 1
        else:
            buff.append(a[i]); i += 1
    if i < mid: buff.extend(a[i:mid])
    if j < hi: buff.extend(a[j:hi])


def heap1_sort(a: List) -> None:
    heapify_sift_up(a)
    heap_sort(a)


def heap2_sort(a: List) -> None:
    heapify_sift_down(a)
    heap_sort(a)


# mapping used by the self-check and the experiment driver (order matters:
# it is the order of the progress line and the output files)
ALGORITHMS: Dict[str, Callable[[List], None]] = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "bubble":    bubble_sort,
    "merge":     merge_sort,
    "heap1":     heap1_sort,
    "heap2":     heap2_sort,
}

LABELS: Dict[str, str] = {
    "selection": "selection",
    "insertion": "insertion",
    "bubble":    "bubble",
    "merge":     "merge",
    "heap1":     "heap v1",
    "heap2":     "heap v2",
}

HEAPIFIERS: Dict[str, Callable[[List], None]] = {
    "heap v1": heapify_sift_up,
    "heap v2": heapify_sift_down,
}
