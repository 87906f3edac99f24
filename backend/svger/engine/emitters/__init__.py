"""Per-target emitters; each module registers one target via ``@emitter``."""
