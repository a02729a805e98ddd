#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Supporting utilities for serini."""
