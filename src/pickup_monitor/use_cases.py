"""Business logic use cases."""

from typing import Optional

from pickup_monitor.core import (
    DEFAULT_RULES,
    DedupDecision,
    DedupGate,
    ExtractionResult,
    KeyValueStore,
    Message,
    MessageSource,
    NotificationService,
    PatternRule,
    ProcessedCodeSet,
    ReminderService,
    RunState,
    RunSummary,
    match_message,
)

MESSAGE_LIMIT = 20
LOOKAHEAD_DAYS = 7

REMINDER_LIST_TITLE = "取件码"
REMINDER_PRIORITY = 5
NOTIFICATION_TITLE = "快递取件提醒"


class ActionDispatcher:
    """Create the reminder and send the notification for a new code."""

    def __init__(
        self,
        reminder_service: ReminderService,
        notification_service: NotificationService,
    ) -> None:
        self.reminder_service = reminder_service
        self.notification_service = notification_service

    def dispatch(self, extraction: ExtractionResult, message: Message) -> None:
        """Fire both actions. Results are not inspected, errors propagate."""
        self.reminder_service.create_reminder(
            f"取件码: {extraction.code}",
            notes=f"位置: {extraction.location}\n原文: {message.content}",
            priority=REMINDER_PRIORITY,
            list_title=REMINDER_LIST_TITLE,
        )

        self.notification_service.send(
            NOTIFICATION_TITLE,
            f"凭取件码 {extraction.code} 至 {extraction.location} 取件",
            {},
        )


class PickupCodeService:
    """Run one pass over recent messages and surface new pickup codes."""

    def __init__(
        self,
        message_source: MessageSource,
        reminder_service: ReminderService,
        notification_service: NotificationService,
        store: KeyValueStore,
        rules: Optional[list[PatternRule]] = None,
    ) -> None:
        self.message_source = message_source
        self.reminder_service = reminder_service
        self.store = store
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.dispatcher = ActionDispatcher(reminder_service, notification_service)

    def run(self) -> RunSummary:
        """Process recent messages once.

        Every step runs at most once per message; any collaborator error
        aborts the run, codes committed before it stay committed.
        """
        messages = self.message_source.read_recent(MESSAGE_LIMIT) or []
        if not messages:
            print("📭 未读取到短信")
            return RunSummary()

        upcoming = self.reminder_service.get_upcoming(LOOKAHEAD_DAYS) or []
        gate = DedupGate(upcoming)

        state = RunState(codes=ProcessedCodeSet.load(self.store))
        if state.codes.legacy_count:
            print(f"🔄 已迁移旧格式缓存: {state.codes.legacy_count} 条")

        new_codes: list[str] = []
        for message in messages:
            extraction = match_message(message, self.rules)
            if extraction is None:
                state.unmatched += 1
                continue

            if self._process(extraction, message, gate, state):
                new_codes.append(extraction.code)

        summary = RunSummary(
            messages_read=len(messages),
            processed=state.processed_count,
            skipped_cached=state.skipped_cached,
            skipped_reminder=state.skipped_reminder,
            unmatched=state.unmatched,
            has_new=state.has_new,
            new_codes=new_codes,
        )
        self._print_summary(summary)
        return summary

    def _process(
        self,
        extraction: ExtractionResult,
        message: Message,
        gate: DedupGate,
        state: RunState,
    ) -> bool:
        """Gate, dispatch and commit one extraction. Returns True if dispatched."""
        code = extraction.code
        decision = gate.check(code, state)

        if decision is DedupDecision.SKIP_CACHED:
            print(f"  ⏭️  跳过已缓存的取件码: {code}")
            return False

        if decision is DedupDecision.SKIP_REMINDER:
            print(f"  ⏭️  跳过现有提醒事项: {code}")
            return False

        self.dispatcher.dispatch(extraction, message)
        print(f"  ✓ 已提取取件码: {code} ({extraction.location})")

        # Persisted per code, never batched to the end of the run.
        gate.commit(code, state)
        return True

    def _print_summary(self, summary: RunSummary) -> None:
        if summary.processed == 0:
            print("📭 未找到新的取件码短信")
            return

        print(f"✅ 新增取件码: {summary.processed} 条 ({', '.join(summary.new_codes)})")
