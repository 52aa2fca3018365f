"""API Resilience Implementations.

Contains the rate-limited scheduler that paces every outgoing request and
the retry orchestrator that resubmits throttled wallet lookups.
Bounded Context: API Resilience
"""
