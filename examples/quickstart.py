"""circbuf Quick Start: a sliding window over the most recent readings."""

import logging

import circbuf

logging.basicConfig(level=logging.DEBUG)

# 1. Create a buffer that keeps the last 4 readings
window = circbuf.from_config(circbuf.BufferConfig(capacity=4))

# 2. Push readings; once full, each push evicts the oldest one
for reading in [12, 15, 11, 18, 21, 19]:
    if window.push_back(reading):
        print(f"pushed {reading}, evicted the oldest reading")

print("window:", window.to_list())
print("mean:", sum(window) / len(window))

# 3. Peek and pop from either end
latest, ok = window.back()
print("latest:", latest, ok)
oldest, ok = window.pop_front()
print("popped oldest:", oldest, ok)

# 4. Walk newest to oldest with front-based indices
for i, value in window.backward():
    print(f"  [{i}] {value}")

# 5. Grow the window without losing data
window.resize(8)
print(window)
