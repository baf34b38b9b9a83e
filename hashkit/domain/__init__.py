"""Domain layer - provider contract, parameter value objects and exceptions."""
