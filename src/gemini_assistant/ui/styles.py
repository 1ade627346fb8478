"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Editor on the left, conversation on the right, input across the bottom.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Editor | Chat
   ============================================ */
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 1fr 1fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Code Editor Pane - Context Source
   ============================================ */
#code-editor {
    height: 100%;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;

    &:focus {
        border: round $secondary;
    }
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 100%;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#chat-history.-maximized {
    column-span: 2;
}

.welcome {
    color: $text-muted;
    padding: 1 2;
}

/* ============================================
   Bottom Bar - Context Source + Input + Log
   ============================================ */
#bottom-bar {
    column-span: 2;
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#context-source {
    height: 1;
    padding: 0 2;
    color: $text-muted;

    &.-selection {
        color: $success;
    }

    &.-error {
        color: $error;
    }
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn, #refresh-btn {
    width: 12;
    height: 100%;
    margin: 0 0 0 1;
}

#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
}

.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.pending {
    & .message-content {
        color: $text-muted;
        text-style: italic;
    }
}

.message-header, .message-content {
    height: auto;
    padding: 0;
    margin: 0;
}

MarkdownFence {
    background: $surface;
    border: round $border;
    margin: 1 0;
}
"""
