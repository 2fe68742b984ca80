"""Dataset loading for the bin lookup.

Rows arrive pre-exported as JSON records; converting spreadsheets into that form happens elsewhere.
"""
