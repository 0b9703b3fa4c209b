from __future__ import annotations


class WorkerGroup:
    PREVIEW = "preview"
