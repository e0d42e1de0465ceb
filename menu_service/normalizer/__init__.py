"""
Menu normalization package.

Responsibilities:
- Load the flat menu export (one record per dish).
- Group dishes by section and assign per-section item ids.
- Reshape each dish into the bilingual menu schema.
- Persist the assembled menu document for presentation layers.
"""
