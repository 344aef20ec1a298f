"""Console report for a reviewer assignment run."""

from typing import Sequence

from .config import Config
from .models import PullRequestSnapshot, ReviewerScore, ScoringWeights


# ANSI color codes
GREEN = '\033[92m'
YELLOW = '\033[93m'
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'

RANK_MARKERS = ['🥇', '🥈', '🥉']


def _format_weight(weight: float) -> str:
    """Render 10.0 as '10' and 0.5 as '0.5'."""
    return f"{weight:g}"


class ReportFormatter:
    """Formats and prints the assignment report."""

    def print_section(self, title: str):
        print("\n" + "="*80)
        print(title)
        print("="*80)

    def print_config(self, config: Config):
        """Echo the configuration the run is using."""
        self.print_section("REVIEWER ASSIGNMENT")
        print(f"  Repository: {config.repository}")
        print(f"  PR Number: {config.pr_number}")
        print(f"  Team Members: {', '.join(config.team_members)}")
        print("\nWeights:")
        print(f"  Open PRs: {_format_weight(config.weights.open_prs)}")
        print(f"  Lines per 100: {_format_weight(config.weights.lines_per_100)}")
        print(f"  Recent reviews: {_format_weight(config.weights.recent_reviews)}")

    def print_pr_details(self, pr: PullRequestSnapshot):
        print(f"  Author: @{pr.author}")
        print(f"  Title: {pr.title or '(no title)'}")
        print(f"  State: {pr.state or 'unknown'}")

    def print_score_breakdown(self, scores: Sequence[ReviewerScore], weights: ScoringWeights):
        """Print how each candidate's score was put together."""
        for score in scores:
            print(
                f"  @{score.username}: {score.total_score:.2f} points "
                f"(Open: {score.open_prs_count} × {_format_weight(weights.open_prs)}, "
                f"Lines: {score.total_lines_in_review} ÷ 100 × {_format_weight(weights.lines_per_100)}, "
                f"Recent: {score.recent_reviews_count} × {_format_weight(weights.recent_reviews)})"
            )

    def print_rankings(self, ranked: Sequence[ReviewerScore]):
        """Print the final ranking, least busy first."""
        self.print_section("FINAL RANKINGS (lowest score = least busy)")

        for i, score in enumerate(ranked):
            marker = RANK_MARKERS[i] if i < len(RANK_MARKERS) else '  '
            color = GREEN + BOLD if i == 0 else RESET
            print(f"{color}{marker} #{i + 1} @{score.username}: {score.total_score:.2f} points{RESET}")
            print(f"       {score.open_prs_count} open PRs, {score.total_lines_in_review} lines, "
                  f"{score.recent_reviews_count} recent reviews")

    def print_best_choice(self, username: str):
        print(f"\n{CYAN}Best choice: @{username}{RESET}")

    def print_assignment_done(self, username: str, pr_number: int):
        print(f"\n{GREEN}Done! PR #{pr_number} has been assigned to @{username}{RESET}")

    def print_no_eligible_reviewers(self):
        print(f"\n{YELLOW}⚠️  No eligible reviewers found "
              f"(is everyone except the author on the team list?){RESET}")
