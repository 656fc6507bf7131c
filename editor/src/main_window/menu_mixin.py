"""Menu bar creation and menu action handlers for HatOverlayEditor"""


class MenuMixin:
    """Menu bar and menu action handlers"""

    def _create_menu_bar(self):
        """Create the menu bar with File, Edit, View menus"""
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        upload_action = file_menu.addAction("&Upload Photo...")
        upload_action.setShortcut("Ctrl+O")
        upload_action.triggered.connect(self.file_actions.upload_photo)

        self.save_image_action = file_menu.addAction("&Save Image...")
        self.save_image_action.setShortcut("Ctrl+S")
        self.save_image_action.triggered.connect(self.file_actions.export_image)

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)

        # Edit Menu (single-key shortcuts are handled in keyPressEvent)
        self.edit_menu = menubar.addMenu("&Edit")

        rotate_left_action = self.edit_menu.addAction("Rotate &Left\tQ")
        rotate_left_action.triggered.connect(lambda: self.transform_actions.rotate('left'))

        rotate_right_action = self.edit_menu.addAction("Rotate &Right\tE")
        rotate_right_action.triggered.connect(lambda: self.transform_actions.rotate('right'))

        self.edit_menu.addSeparator()

        scale_up_action = self.edit_menu.addAction("Scale &Up\t+")
        scale_up_action.triggered.connect(lambda: self.transform_actions.scale('up'))

        scale_down_action = self.edit_menu.addAction("Scale &Down\t-")
        scale_down_action.triggered.connect(lambda: self.transform_actions.scale('down'))

        self.edit_menu.addSeparator()

        self.flip_action = self.edit_menu.addAction("&Flip Horizontal\tF")
        self.flip_action.triggered.connect(self.transform_actions.toggle_flip)

        reset_action = self.edit_menu.addAction("Re&set\tR")
        reset_action.triggered.connect(self.transform_actions.reset)

        # View Menu
        view_menu = menubar.addMenu("&View")

        self.seasonal_action = view_menu.addAction("&Christmas Mode")
        self.seasonal_action.setCheckable(True)
        self.seasonal_action.setChecked(False)
        self.seasonal_action.toggled.connect(self.transform_actions.set_seasonal_mode)

    def _update_menu_actions(self):
        """Enable/disable menu actions from the session state"""
        model = self.session.model
        self.save_image_action.setEnabled(self.session.has_photo)
        self.flip_action.setEnabled(model.can_flip)

        if self.seasonal_action.isChecked() != model.seasonal_mode:
            self.seasonal_action.blockSignals(True)
            self.seasonal_action.setChecked(model.seasonal_mode)
            self.seasonal_action.blockSignals(False)
