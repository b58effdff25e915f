"""Terraform provider support package.

To bind a pair-keyed resource:
    from tfprovider.core.pair import PairID, BindResource

To call the platform API:
    from tfprovider.core.platform import PlatformClient
"""
