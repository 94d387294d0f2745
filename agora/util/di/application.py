"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.topic import (
    ApproveTopicUseCase,
    CreateTopicButtonUseCase,
    CreateTopicUseCase,
    LatestTopicsUseCase,
    MorePostsUseCase,
    ShowTopicUseCase,
    TopicBreadcrumbUseCase,
)
from agora.application.usecase.vote import CastVoteUseCase, MarkSolutionUseCase
from agora.config import ForumSettings
from agora.domain.repository import UnitOfWork
from agora.domain.service import (
    CategoryService,
    ContentFilterService,
    MemberService,
    NotificationService,
    PermissionService,
    PollService,
    PostService,
    SpamService,
    TopicService,
    VoteService,
)
from agora.util.di.base import ProviderBase
from agora.util.lang import Lang


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        member_service: MemberService,
        post_service: PostService,
        unit_of_work: UnitOfWork,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            member_service=member_service,
            post_service=post_service,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_solution_use_case(
        self,
        topic_service: TopicService,
        post_service: PostService,
        member_service: MemberService,
        unit_of_work: UnitOfWork,
    ) -> MarkSolutionUseCase:
        """Provide mark solution use case."""
        return MarkSolutionUseCase(
            topic_service=topic_service,
            post_service=post_service,
            member_service=member_service,
            unit_of_work=unit_of_work,
        )

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_show_topic_use_case(
        self,
        topic_service: TopicService,
        post_service: PostService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        vote_service: VoteService,
        poll_service: PollService,
        notification_service: NotificationService,
        forum_settings: ForumSettings,
        unit_of_work: UnitOfWork,
    ) -> ShowTopicUseCase:
        """Provide show topic use case."""
        return ShowTopicUseCase(
            topic_service=topic_service,
            post_service=post_service,
            category_service=category_service,
            permission_service=permission_service,
            member_service=member_service,
            vote_service=vote_service,
            poll_service=poll_service,
            notification_service=notification_service,
            forum_settings=forum_settings,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_more_posts_use_case(
        self,
        topic_service: TopicService,
        post_service: PostService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> MorePostsUseCase:
        """Provide more posts use case."""
        return MorePostsUseCase(
            topic_service=topic_service,
            post_service=post_service,
            category_service=category_service,
            permission_service=permission_service,
            member_service=member_service,
            vote_service=vote_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_latest_topics_use_case(
        self,
        topic_service: TopicService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        forum_settings: ForumSettings,
    ) -> LatestTopicsUseCase:
        """Provide latest topics use case."""
        return LatestTopicsUseCase(
            topic_service=topic_service,
            category_service=category_service,
            permission_service=permission_service,
            member_service=member_service,
            forum_settings=forum_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_topic_button_use_case(
        self,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
    ) -> CreateTopicButtonUseCase:
        return CreateTopicButtonUseCase(
            category_service=category_service,
            permission_service=permission_service,
            member_service=member_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_topic_breadcrumb_use_case(
        self, topic_service: TopicService, category_service: CategoryService
    ) -> TopicBreadcrumbUseCase:
        return TopicBreadcrumbUseCase(
            topic_service=topic_service, category_service=category_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self,
        topic_service: TopicService,
        category_service: CategoryService,
        permission_service: PermissionService,
        member_service: MemberService,
        content_filter_service: ContentFilterService,
        poll_service: PollService,
        spam_service: SpamService,
        notification_service: NotificationService,
        forum_settings: ForumSettings,
        lang: Lang,
        unit_of_work: UnitOfWork,
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(
            topic_service=topic_service,
            category_service=category_service,
            permission_service=permission_service,
            member_service=member_service,
            content_filter_service=content_filter_service,
            poll_service=poll_service,
            spam_service=spam_service,
            notification_service=notification_service,
            forum_settings=forum_settings,
            lang=lang,
            unit_of_work=unit_of_work,
        )

    @provide(scope=Scope.REQUEST)
    def get_approve_topic_use_case(
        self,
        topic_service: TopicService,
        member_service: MemberService,
        unit_of_work: UnitOfWork,
    ) -> ApproveTopicUseCase:
        """Provide approve topic use case."""
        return ApproveTopicUseCase(
            topic_service=topic_service,
            member_service=member_service,
            unit_of_work=unit_of_work,
        )
