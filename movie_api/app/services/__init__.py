"""
Service layer abstraction.

Each service encapsulates the operations of a domain over the store it
is constructed with, so API handlers never touch storage directly.
"""
