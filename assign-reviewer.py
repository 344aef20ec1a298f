#!/usr/bin/env python3
"""
GitHub Reviewer Assigner
Requests a review from the least busy team member on a pull request.
"""

from review_assigner.main import main


if __name__ == "__main__":
    main()
