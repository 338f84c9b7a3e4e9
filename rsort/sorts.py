"""Sorting algorithms that draw the array after every step."""

from __future__ import annotations

import random

from .algorithm import Algorithm


class _SortVisualisation:
    """Holds the array to sort and shares setup between the algorithms."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        self.alg = Algorithm(length, rng)

    @property
    def nums(self) -> list[int]:
        return self.alg.nums


class BubbleSort(_SortVisualisation):
    """Repeated passes of neighbour swaps; one frame per pass."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        super().__init__(length, rng)

    def start(self, globals, display) -> None:
        alg = self.alg
        nums = alg.nums
        alg.shuffle(globals, display)

        done = False
        while not done:
            done = True
            for i in range(alg.length - 1):
                if alg.window_should_close(display, globals):
                    return
                if nums[i] > nums[i + 1]:
                    done = False
                    nums[i], nums[i + 1] = nums[i + 1], nums[i]
            alg.algorithm_graphics(globals, display)


class SelectionSort(_SortVisualisation):
    """Moves the smallest remaining value to the front; one frame per position."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        super().__init__(length, rng)

    def start(self, globals, display) -> None:
        alg = self.alg
        nums = alg.nums
        alg.shuffle(globals, display)

        for i in range(alg.length - 1):
            if alg.window_should_close(display, globals):
                return
            min_idx = min(range(i, alg.length), key=nums.__getitem__)
            nums[min_idx], nums[i] = nums[i], nums[min_idx]

            globals.update(display)
            alg.algorithm_graphics(globals, display)


class InsertionSort(_SortVisualisation):
    """Inserts each value into the sorted prefix; the last value is left in place."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        super().__init__(length, rng)

    def start(self, globals, display) -> None:
        alg = self.alg
        nums = alg.nums
        alg.shuffle(globals, display)

        for i in range(alg.length - 1):
            if alg.window_should_close(display, globals):
                return
            key = nums[i]
            j = i - 1
            while j >= 0 and key < nums[j]:
                nums[j + 1] = nums[j]
                j -= 1
            nums[j + 1] = key

            globals.update(display)
            alg.algorithm_graphics(globals, display)


class QuickSort(_SortVisualisation):
    """Lomuto-partition quicksort; a frame after every swap and every sub-sort."""

    def __init__(self, length: int, rng: random.Random | None = None) -> None:
        super().__init__(length, rng)

    def start(self, globals, display) -> None:
        self.alg.shuffle(globals, display)
        self._quick_sort(globals, display, 0, self.alg.length - 1)

    def _quick_sort(self, globals, display, low: int, high: int) -> None:
        if self.alg.window_should_close(display, globals):
            return
        if low >= high:
            return

        pivot_idx = self._partition(low, high, globals, display)
        self._quick_sort(globals, display, low, pivot_idx - 1)
        self._quick_sort(globals, display, pivot_idx + 1, high)

        globals.update(display)
        self.alg.algorithm_graphics(globals, display)

    def _partition(self, low: int, high: int, globals, display) -> int:
        nums = self.alg.nums
        pivot = nums[high]
        i = low - 1

        for j in range(low, high + 1):
            if nums[j] >= pivot:
                continue
            i += 1
            nums[i], nums[j] = nums[j], nums[i]

            globals.update(display)
            self.alg.algorithm_graphics(globals, display)

        nums[i + 1], nums[high] = nums[high], nums[i + 1]
        return i + 1