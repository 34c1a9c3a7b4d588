"""Tests for the plugin setting model."""

from lms.models.plugin_setting import PluginSetting


class TestPluginSetting:
    """Test plugin setting persistence."""

    def test_find_missing(self, mock_es):
        assert PluginSetting.find('kaltura') is None
        mock_es.get.assert_called_once_with('plugin_settings', 'kaltura')

    def test_find(self, mock_es):
        mock_es.get.return_value = {
            '_id': 'kaltura',
            '_source': {'settings': {'domain': 'kaltura.fake.local'}, 'disabled': True}
        }
        setting = PluginSetting.find('kaltura')
        assert setting.name == 'kaltura'
        assert setting.settings == {'domain': 'kaltura.fake.local'}
        assert setting.disabled is True
        assert setting.enabled is False

    def test_missing_settings_default_to_empty(self):
        setting = PluginSetting({'name': 'kaltura', 'settings': None})
        assert setting.settings == {}
        assert setting.enabled is True

    def test_save(self, mock_es):
        setting = PluginSetting.save('kaltura', {'partner_id': '420'})
        index_name, doc_id, document = mock_es.index.call_args[0]
        assert (index_name, doc_id) == ('plugin_settings', 'kaltura')
        assert document['settings'] == {'partner_id': '420'}
        assert document['disabled'] is False
        assert setting.to_dict() == document
