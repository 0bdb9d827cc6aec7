"""Turn parsed presentations into rich renderables for the command line.

- [`rich_tree`][termdeck.processing.rich_tree] shows the structure of a presentation
- [`rich_preview`][termdeck.processing.rich_preview] shows slides as laid out text
"""
