"""
Module: extractor.detection

Purpose:
    Detection subpackage for recognizing question-bank text elements.
    Contains modules for spotting header furniture and reading grading
    metadata.

Key Modules:
    - headers: Header/title line detection by keyword co-occurrence
    - metadata: Course outcome (CO<n>), level (L<n>) and marks detection

Used By:
    - extractor.segmentation: Skips headers, fills candidate metadata
"""
