"""Intent fulfillment.

The fulfillment layer maps a recognized intent plus its parameters to one reply string, looking rows
up in the hospital spreadsheet where needed.
"""
