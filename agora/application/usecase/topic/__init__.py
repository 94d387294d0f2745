"""Topic use cases."""

from .approve_topic import (
    ApproveTopicRequest,
    ApproveTopicResponse,
    ApproveTopicUseCase,
)
from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .create_topic_button import (
    CreateTopicButtonRequest,
    CreateTopicButtonResponse,
    CreateTopicButtonUseCase,
)
from .latest_topics import (
    LatestTopicItem,
    LatestTopicsRequest,
    LatestTopicsResponse,
    LatestTopicsUseCase,
)
from .more_posts import MorePostsRequest, MorePostsResponse, MorePostsUseCase
from .show_topic import ShowTopicRequest, ShowTopicResponse, ShowTopicUseCase
from .topic_breadcrumb import (
    TopicBreadcrumbRequest,
    TopicBreadcrumbResponse,
    TopicBreadcrumbUseCase,
)
from .view import CategoryView, PermissionView, PostView, TopicView

__all__ = [
    "ApproveTopicRequest",
    "ApproveTopicResponse",
    "ApproveTopicUseCase",
    "CategoryView",
    "CreateTopicButtonRequest",
    "CreateTopicButtonResponse",
    "CreateTopicButtonUseCase",
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "LatestTopicItem",
    "LatestTopicsRequest",
    "LatestTopicsResponse",
    "LatestTopicsUseCase",
    "MorePostsRequest",
    "MorePostsResponse",
    "MorePostsUseCase",
    "PermissionView",
    "PostView",
    "ShowTopicRequest",
    "ShowTopicResponse",
    "ShowTopicUseCase",
    "TopicBreadcrumbRequest",
    "TopicBreadcrumbResponse",
    "TopicBreadcrumbUseCase",
    "TopicView",
]
