"""Small command-line tools: a greeter, a word frequency counter, a hex file reader/writer and a hex grid pathfinder."""

__version__ = "0.1.0"