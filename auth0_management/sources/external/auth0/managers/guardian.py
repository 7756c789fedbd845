from typing import Any, Dict, List, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    ApiResponse,
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)

PHONE = '/guardian/factors/phone'
SMS = '/guardian/factors/sms'
PUSH = '/guardian/factors/push-notification'


class GuardianManager(BaseManager):
    """Multi-factor authentication: enrollments, factors, policies and providers"""

    # Enrollments

    async def get_guardian_enrollment(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a multi-factor authentication enrollment

        HTTP GET /guardian/enrollments/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/guardian/enrollments/{id}', params, required=['id'], request_options=request_options
        )

    async def delete_guardian_enrollment(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a multi-factor authentication enrollment

        HTTP DELETE /guardian/enrollments/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/guardian/enrollments/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def create_enrollment_ticket(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a multi-factor authentication enrollment ticket

        HTTP POST /guardian/enrollments/ticket

        Args:
            body: ``user_id`` (required), ``email``, ``send_mail``, ``email_locale`` and ``factor``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/guardian/enrollments/ticket', body=body, request_options=request_options
        )

    # Factors and policies

    async def get_factors(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the multi-factor authentication factors

        HTTP GET /guardian/factors

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/guardian/factors', request_options=request_options)

    async def update_factor(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Enable or disable a factor

        ``name`` takes a GuardianFactorName value.

        HTTP PUT /guardian/factors/{name}

        Args:
            params: Path ``name``
            body: ``enabled`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PUT', '/guardian/factors/{name}', params, required=['name'], body=body, request_options=request_options
        )

    async def get_policies(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the multi-factor authentication policies

        HTTP GET /guardian/policies

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/guardian/policies', request_options=request_options)

    async def update_policies(
        self, body: List[str], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the multi-factor authentication policies

        HTTP PUT /guardian/policies

        Args:
            body: List of policy names, e.g. ``["all-applications"]``; an empty list disables them
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', '/guardian/policies', body=body, request_options=request_options)

    # Phone factor

    async def get_phone_factor_templates(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the phone enrollment and verification templates

        HTTP GET /guardian/factors/phone/templates

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PHONE + '/templates', request_options=request_options)

    async def set_phone_factor_templates(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the phone enrollment and verification templates

        HTTP PUT /guardian/factors/phone/templates

        Args:
            body: ``enrollment_message`` and ``verification_message`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PHONE + '/templates', body=body, request_options=request_options)

    async def get_phone_factor_message_types(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the message types of the phone factor

        HTTP GET /guardian/factors/phone/message-types

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PHONE + '/message-types', request_options=request_options)

    async def update_phone_factor_message_types(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the message types of the phone factor

        HTTP PUT /guardian/factors/phone/message-types

        Args:
            body: ``message_types`` (required): a list holding ``sms`` and/or ``voice``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PHONE + '/message-types', body=body, request_options=request_options)

    async def get_phone_factor_selected_provider(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the selected phone factor provider

        HTTP GET /guardian/factors/phone/selected-provider

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PHONE + '/selected-provider', request_options=request_options)

    async def update_phone_factor_selected_provider(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Select the phone factor provider

        HTTP PUT /guardian/factors/phone/selected-provider

        Args:
            body: ``provider`` (required): ``auth0``, ``twilio`` or ``phone-message-hook``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PHONE + '/selected-provider', body=body, request_options=request_options)

    async def get_phone_factor_provider_twilio(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the Twilio phone factor configuration

        HTTP GET /guardian/factors/phone/providers/twilio

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PHONE + '/providers/twilio', request_options=request_options)

    async def update_phone_factor_provider_twilio(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the Twilio phone factor configuration

        HTTP PUT /guardian/factors/phone/providers/twilio

        Args:
            body: ``from``, ``messaging_service_sid``, ``auth_token`` and ``sid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PHONE + '/providers/twilio', body=body, request_options=request_options)

    # SMS factor

    async def get_sms_factor_templates(self, request_options: Optional[RequestOptions] = None) -> ApiResponse:
        """Get the SMS enrollment and verification templates

        HTTP GET /guardian/factors/sms/templates

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse on 204, otherwise JSONApiResponse
        """
        return await self._request(
            'GET', SMS + '/templates', kind=ResponseKind.JSON_OR_VOID, request_options=request_options
        )

    async def set_sms_factor_templates(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the SMS enrollment and verification templates

        HTTP PUT /guardian/factors/sms/templates

        Args:
            body: ``enrollment_message`` and ``verification_message`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', SMS + '/templates', body=body, request_options=request_options)

    async def get_sms_selected_provider(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the selected SMS factor provider

        HTTP GET /guardian/factors/sms/selected-provider

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', SMS + '/selected-provider', request_options=request_options)

    async def set_sms_selected_provider(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Select the SMS factor provider

        HTTP PUT /guardian/factors/sms/selected-provider

        Args:
            body: ``provider`` (required): ``auth0``, ``twilio`` or ``phone-message-hook``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', SMS + '/selected-provider', body=body, request_options=request_options)

    async def get_sms_factor_provider_twilio(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the Twilio SMS factor configuration

        HTTP GET /guardian/factors/sms/providers/twilio

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', SMS + '/providers/twilio', request_options=request_options)

    async def set_sms_factor_provider_twilio(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the Twilio SMS factor configuration

        HTTP PUT /guardian/factors/sms/providers/twilio

        Args:
            body: ``from``, ``messaging_service_sid``, ``auth_token`` and ``sid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', SMS + '/providers/twilio', body=body, request_options=request_options)

    # Push notification factor

    async def get_push_notification_selected_provider(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the selected push notification provider

        HTTP GET /guardian/factors/push-notification/selected-provider

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PUSH + '/selected-provider', request_options=request_options)

    async def set_push_notification_selected_provider(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Select the push notification provider

        HTTP PUT /guardian/factors/push-notification/selected-provider

        Args:
            body: ``provider`` (required): ``guardian``, ``sns`` or ``direct``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PUSH + '/selected-provider', body=body, request_options=request_options)

    async def get_push_notification_provider_apns(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the APNs push notification configuration

        HTTP GET /guardian/factors/push-notification/providers/apns

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PUSH + '/providers/apns', request_options=request_options)

    async def update_push_notification_provider_apns(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the APNs push notification configuration

        HTTP PATCH /guardian/factors/push-notification/providers/apns

        Args:
            body: ``sandbox``, ``bundle_id`` and ``p12``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', PUSH + '/providers/apns', body=body, request_options=request_options)

    async def set_push_notification_provider_apns(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Replace the APNs push notification configuration

        HTTP PUT /guardian/factors/push-notification/providers/apns

        Args:
            body: ``sandbox``, ``bundle_id`` and ``p12``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PUSH + '/providers/apns', body=body, request_options=request_options)

    async def update_push_notification_provider_fcm(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the FCM push notification configuration

        HTTP PATCH /guardian/factors/push-notification/providers/fcm

        Args:
            body: ``server_key``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', PUSH + '/providers/fcm', body=body, request_options=request_options)

    async def set_push_notification_provider_fcm(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Replace the FCM push notification configuration

        HTTP PUT /guardian/factors/push-notification/providers/fcm

        Args:
            body: ``server_key``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PUSH + '/providers/fcm', body=body, request_options=request_options)

    async def get_push_notification_provider_sns(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the AWS SNS push notification configuration

        HTTP GET /guardian/factors/push-notification/providers/sns

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', PUSH + '/providers/sns', request_options=request_options)

    async def update_push_notification_provider_sns(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the AWS SNS push notification configuration

        HTTP PATCH /guardian/factors/push-notification/providers/sns

        Args:
            body: ``aws_access_key_id``, ``aws_secret_access_key``, ``aws_region``,
                ``sns_apns_platform_application_arn`` and ``sns_gcm_platform_application_arn``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', PUSH + '/providers/sns', body=body, request_options=request_options)

    async def set_push_notification_provider_sns(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Replace the AWS SNS push notification configuration

        HTTP PUT /guardian/factors/push-notification/providers/sns

        Args:
            body: ``aws_access_key_id``, ``aws_secret_access_key``, ``aws_region``,
                ``sns_apns_platform_application_arn`` and ``sns_gcm_platform_application_arn``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PUT', PUSH + '/providers/sns', body=body, request_options=request_options)
