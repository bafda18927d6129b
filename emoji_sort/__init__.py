"""
EmojiSort step engine

Core modules:
- sorter: algorithm selection and the sort()/randomise_positions() entry points
- algorithms: step-emitting bubble, insertion, selection, merge and stupid sort
- steps: the replayable step vocabulary consumed by renderers
- replay: apply a step trace to an array (no behavior changes)
"""
