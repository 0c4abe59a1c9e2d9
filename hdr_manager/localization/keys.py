"""Keys of every localized string the add-on shows."""


class LocalizationKeys:
    HDR_MANAGER_EXCLUSION_TAG = "HdrManagerExclusionTag"
    CONTEXT_MENU_SECTION_HEADER = "ContextMenuSectionHeader"
    CONTEXT_MENU_ADD_EXCLUSION_TAG = "ContextMenuAddExclusionTag"
    CONTEXT_MENU_REMOVE_EXCLUSION_TAG = "ContextMenuRemoveExclusionTag"
    CONTEXT_MENU_ENABLE_HDR_SUPPORT = "ContextMenuEnableHdrSupport"
    CONTEXT_MENU_DISABLE_HDR_SUPPORT = "ContextMenuDisableHdrSupport"
    EXTENSION_MENU_RUN_HDR_ACTIVATION = "ExtensionMenuRunHdrActivation"
    DIALOG_RESPONSE_OK = "DialogResponseOK"
    DIALOG_RESPONSE_SUPPRESS_WARNING = "DialogResponseSuppressWarning"
    PCGAMINGWIKI_DIALOG_WARNING_MESSAGE = "PCGamingWikiDialogWarningMessage"

    @classmethod
    def all(cls) -> list:
        return [
            value for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]
