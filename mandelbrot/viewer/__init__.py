"""Interactive viewer, contrast adjustment and plotting of escape fields.
"""
