"""
Core numeric value objects.

Pure, immutable building blocks with no I/O: percentages that take part in
ordinary arithmetic, and ordered intervals over any comparable type.
"""
