"""
assetgraph.commands - CLI command implementations
"""
