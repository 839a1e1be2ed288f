"""Structured content detection for pasted or extracted text.

Submodules:
  patterns     -- compiled regex patterns and threshold constants
  classifiers  -- line / cell classification helpers shared by the detectors
  schema       -- Detection, ParseResult and adapter-shape Pydantic models
  config       -- DetectionLimits and environment loading
  dice         -- dice-roll table detection (d6, d66, 2d6)
  aligned      -- whitespace-aligned table detection
  pipe         -- pipe / markdown table detection
  delimited    -- tab- and comma-separated value detection
  key_value    -- "label: value" list detection
  fallback     -- line-list fallback
  dedup        -- cross-detector deduplication
  bounds       -- row / column cap enforcement
  ranking      -- confidence ranking and best-match selection
  adapters     -- table-shape and sections-shape output transforms
  pipeline     -- main analyze() entry point and command line
"""
