"""
Adapters - response parsing and LLM providers
"""
