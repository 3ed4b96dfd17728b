"""Services Layer — one service class per screen family.

Invariants:
    - Services orchestrate fetch → resolve → write; policy lives in core/
    - Each service is built per request with (store, actor[, blobs])

Design Decisions:
    - One file per screen family for locality (no god objects)
"""
