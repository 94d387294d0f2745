"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, ForumSettings, PointsSettings
from agora.domain.repository import (
    BannedContentRepository,
    CategoryRepository,
    EmailRepository,
    MemberPointsRepository,
    MemberRepository,
    PollRepository,
    PostRepository,
    SubscriptionRepository,
    TopicRepository,
    VoteRepository,
)
from agora.domain.service import (
    CategoryService,
    ContentFilterService,
    JWTService,
    MemberPointsService,
    MemberService,
    NotificationService,
    PermissionService,
    PollService,
    PostService,
    SpamClassifier,
    SpamService,
    TopicService,
    VoteService,
)
from agora.util.di.base import ProviderBase
from agora.util.lang import Lang


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_member_service(self, member_repository: MemberRepository) -> MemberService:
        """Provide member domain service."""
        return MemberService(member_repository=member_repository)

    @provide
    def get_member_points_service(
        self,
        member_points_repository: MemberPointsRepository,
        member_repository: MemberRepository,
    ) -> MemberPointsService:
        """Provide points ledger domain service."""
        return MemberPointsService(
            member_points_repository=member_points_repository,
            member_repository=member_repository,
        )

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        return CategoryService(category_repository=category_repository)

    @provide
    def get_permission_service(
        self, category_repository: CategoryRepository
    ) -> PermissionService:
        return PermissionService(category_repository=category_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_topic_service(
        self,
        topic_repository: TopicRepository,
        post_service: PostService,
        member_points_service: MemberPointsService,
        points_settings: PointsSettings,
    ) -> TopicService:
        """Provide topic domain service."""
        return TopicService(
            topic_repository=topic_repository,
            post_service=post_service,
            member_points_service=member_points_service,
            points_settings=points_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        member_service: MemberService,
        member_points_service: MemberPointsService,
        points_settings: PointsSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            member_service=member_service,
            member_points_service=member_points_service,
            points_settings=points_settings,
        )

    @provide
    def get_poll_service(self, poll_repository: PollRepository) -> PollService:
        return PollService(poll_repository=poll_repository)

    @provide
    def get_content_filter_service(
        self, banned_content_repository: BannedContentRepository
    ) -> ContentFilterService:
        return ContentFilterService(banned_content_repository=banned_content_repository)

    @provide
    def get_spam_service(self, classifier: SpamClassifier) -> SpamService:
        """Provide spam check domain service.

        Args:
            classifier: Spam classifier from the akismet component
        """
        return SpamService(classifier=classifier)

    @provide
    def get_notification_service(
        self,
        subscription_repository: SubscriptionRepository,
        email_repository: EmailRepository,
        member_service: MemberService,
        forum_settings: ForumSettings,
        lang: Lang,
    ) -> NotificationService:
        """Provide subscription and notification domain service."""
        return NotificationService(
            subscription_repository=subscription_repository,
            email_repository=email_repository,
            member_service=member_service,
            forum_settings=forum_settings,
            lang=lang,
        )
