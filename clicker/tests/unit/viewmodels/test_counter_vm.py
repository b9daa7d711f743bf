from __future__ import annotations

from typing import List

import pytest

from clicker.viewmodels.counter_vm import LABEL_PREFIX, ClickCounterVM


def test_initial_label_text_reads_zero() -> None:
    vm = ClickCounterVM()

    assert vm.clicks == 0
    assert vm.label_text == "Number of button clicks: 0"


@pytest.mark.parametrize("activations", [1, 3, 17])
def test_increment_counts_each_activation(activations: int) -> None:
    pushed: List[str] = []
    vm = ClickCounterVM(on_label_changed=pushed.append)

    for _ in range(activations):
        vm.increment()

    assert vm.clicks == activations
    assert vm.label_text == f"{LABEL_PREFIX}{activations}"
    assert pushed[-1] == vm.label_text
    assert len(pushed) == activations


def test_counter_never_decreases() -> None:
    vm = ClickCounterVM()
    seen = [vm.clicks]
    for _ in range(5):
        vm.increment()
        seen.append(vm.clicks)

    assert seen == sorted(seen)
    assert seen == [0, 1, 2, 3, 4, 5]


def test_publish_pushes_without_counting() -> None:
    pushed: List[str] = []
    vm = ClickCounterVM(on_label_changed=pushed.append)

    assert vm.publish() == "Number of button clicks: 0"
    assert vm.clicks == 0
    assert pushed == ["Number of button clicks: 0"]


def test_negative_start_is_rejected() -> None:
    with pytest.raises(ValueError):
        ClickCounterVM(clicks=-1)
