"""Type hints used in Bridge Scorecard."""

from typing import Literal

# Vulnerability display literals
VulnerabilityText = Literal["None", "N-S", "E-W", "Both"]

# Display colour literals handed to the presentation layer
SuitColour = Literal["red", "black", "blue"]
ScoreColour = Literal["green", "red", "gray"]
