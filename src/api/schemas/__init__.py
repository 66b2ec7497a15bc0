# This file marks the schemas package for request payload models.
# Builders in `src.api` serialize through these models so JSON shape is defined once.
