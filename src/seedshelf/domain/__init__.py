"""Domain layer: category options, name rules and option resolution."""
