from unittest.mock import patch

import pytest

from infrastructure.clients.aws import SessionProvider, TranslateClient
from infrastructure.operations import OperationResult


@pytest.mark.unit
@patch("infrastructure.clients.aws.translate.execute_aws_api_call")
def test_translate_text_single_attempt(mock_execute):
    mock_execute.return_value = OperationResult.success(data={"TranslatedText": "Hi"})
    client = TranslateClient(
        SessionProvider(
            region="ca-central-1", aws_access_key_id="AKIA", aws_secret_access_key="s"
        )
    )

    result = client.translate_text("안녕", "auto", "en")

    assert result.data == {"TranslatedText": "Hi"}
    mock_execute.assert_called_once_with(
        "translate",
        "translate_text",
        max_retries=0,
        Text="안녕",
        SourceLanguageCode="auto",
        TargetLanguageCode="en",
        session_config={
            "region_name": "ca-central-1",
            "aws_access_key_id": "AKIA",
            "aws_secret_access_key": "s",
        },
        client_config=None,
    )
