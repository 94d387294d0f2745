"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .content_filter_service import ContentFilterService
from .jwt_service import JWTService
from .member_points_service import MemberPointsService
from .member_service import MemberService
from .notification_service import NotificationService
from .permission_service import PermissionService
from .poll_service import PollService, PollSummary
from .post_service import PostPage, PostService
from .spam_service import SpamClassifier, SpamService
from .topic_service import TopicService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "CategoryService",
    "ContentFilterService",
    "JWTService",
    "MemberPointsService",
    "MemberService",
    "NotificationService",
    "PermissionService",
    "PollService",
    "PollSummary",
    "PostPage",
    "PostService",
    "Service",
    "SpamClassifier",
    "SpamService",
    "TopicService",
    "VoteOutcome",
    "VoteService",
]
