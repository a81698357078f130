import json
from click.testing import CliRunner
from runtime_fees._cli import cli
from runtime_fees.config import default_fees_config


def test_show():
    runner = CliRunner()
    result = runner.invoke(cli, ['show'])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == default_fees_config().to_obj()


def test_show_free():
    runner = CliRunner()
    result = runner.invoke(cli, ['show', '--free'])
    assert result.exit_code == 0, result.output
    obj = json.loads(result.output)
    assert obj['action_receipt_creation_config'] == {'send_sir': 0, 'send_not_sir': 0, 'execution': 0}
    assert obj['burnt_gas_reward'] == [0, 1]


def test_min_receipt_gas():
    runner = CliRunner()
    result = runner.invoke(cli, ['min-receipt-gas'])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "5530233375000"


def test_check_valid_and_invalid():
    runner = CliRunner()
    with runner.isolated_filesystem():
        obj = default_fees_config().to_obj()
        with open('fees.json', 'w') as f:
            json.dump(obj, f)
        result = runner.invoke(cli, ['check', 'fees.json'])
        assert result.exit_code == 0, result.output
        assert "fees config is valid" in result.output

        obj['data_receipt_creation_config']['base_cost'] = {'send_sir': 1, 'send_not_sir': 1, 'execution': 1}
        with open('cheap_data.json', 'w') as f:
            json.dump(obj, f)
        result = runner.invoke(cli, ['check', 'cheap_data.json'])
        assert result.exit_code != 0
        assert "invalid fees config" in result.output


def test_check_non_integer_ratio():
    runner = CliRunner()
    with runner.isolated_filesystem():
        obj = default_fees_config().to_obj()
        obj['burnt_gas_reward'] = [0.3, 1]
        with open('float_ratio.json', 'w') as f:
            json.dump(obj, f)
        result = runner.invoke(cli, ['check', 'float_ratio.json'])
        assert result.exit_code == 1
        assert "invalid fees config" in result.output
        assert not isinstance(result.exception, AttributeError)
