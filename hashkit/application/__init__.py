"""Application layer - provider registry, selection and upgrade workflow."""
