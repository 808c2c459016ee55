import logging
import random
import time

from bstmap import OrderedMap

SAMPLE_SIZE = 20000
RANDOM_SEED = 7
RANGE_WIDTH = 10
LOG_LEVEL = logging.WARNING


def run_build_and_smoke_test():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    print("--- OrderedMap build + smoke test ---")

    # Shuffled input keeps the unbalanced tree shallow on average.
    keys = list(range(SAMPLE_SIZE))
    random.Random(RANDOM_SEED).shuffle(keys)

    tree = OrderedMap()
    start_time = time.time()
    for key in keys:
        tree.insert(key, f"value-{key}")
    end_time = time.time()

    print(f"Inserted {len(tree)} entries in {end_time - start_time:.2f}s")

    if tree.is_empty():
        print("No entries loaded.")
        return

    mid_key = SAMPLE_SIZE // 2
    position = tree.find(mid_key)
    if position == tree.end():
        print(f"Sample FIND {mid_key}: missing")
    else:
        print(f"Sample FIND {mid_key}: {position.get()}")

    range_start = tree.begin().key
    range_end = range_start + RANGE_WIDTH
    entries_in_range = list(tree.range(range_start, range_end))
    print(f"Range [{range_start}, {range_end}) -> {len(entries_in_range)} entries")
    for key, value in entries_in_range[:3]:
        print(f"  - Key: {key}, Value: {value}")
    if len(entries_in_range) > 3:
        print("  ...")

    start_time = time.time()
    for key in keys[::2]:
        tree.erase(key)
    end_time = time.time()
    print(f"Erased {len(keys[::2])} entries in {end_time - start_time:.2f}s, {len(tree)} remain")


if __name__ == "__main__":
    run_build_and_smoke_test()
