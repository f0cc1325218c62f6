"""Build, read and write SARIF 2.1.0 reports, and convert tfsec results to SARIF."""

__version__ = "0.1.0"