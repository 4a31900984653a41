"""Reserved cost values shared by the costmap and the critics."""

FREE_SPACE = 0
INSCRIBED_INFLATED_OBSTACLE = 253
LETHAL_OBSTACLE = 254
NO_INFORMATION = 255

# Critic weights are divided by this to share a regime with other critics
COST_NORMALIZER = 254.0
