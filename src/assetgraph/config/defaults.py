"""
assetgraph.config.defaults - Default configuration values
"""

DEFAULT_CONFIG = {
    "scan": {
        "meta_extension": ".meta",
        "reference_extensions": [
            ".unity",
            ".prefab",
            ".asset",
            ".mat",
            ".anim",
            ".controller",
        ],
        "skip_dirs": [],
    },
    "traversal": {
        "max_depth": 8,
    },
}

# Display depth range accepted by `deps` (flag or traversal.max_depth)
MIN_DEPTH = 1
MAX_DEPTH = 32
