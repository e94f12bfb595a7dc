"""Infrastructure layer - concrete adapters and wiring.

Everything here depends inward on the domain interfaces; nothing in the
domain or application layers imports from this package.
"""
