"""
TradeQuote: good/better/best quoting for trade-service proposals.

Pure math core: line items in, Quote out. No AI, no database.
"""
