"""Weather diary example.

Learns day-to-day weather changes from a short diary and prints a few
simulated weeks. Run with:

    python examples/weather.py
"""

import logging

import chainwalk


logging.basicConfig(level=logging.INFO)

DIARY = [
	"sun", "sun", "cloud", "rain", "rain", "cloud", "sun",
	"sun", "sun", "sun", "cloud", "cloud", "rain", "storm",
	"rain", "cloud", "sun", "sun", "cloud", "rain", "sun",
]


def main () -> None:

	chain = chainwalk.MarkovChain(chainwalk.StateCapabilities.for_values(), seed=2024)
	chain.observe(DIARY)

	for week in range(1, 4):
		start = chain.find_or_create("sun")
		print(f"Week {week}: {' '.join(chain.walk(start, max_length=7))}")

	chain.destroy()


if __name__ == "__main__":
	main()
