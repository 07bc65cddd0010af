from __future__ import annotations

import discord

from tzcompanion.modules.time_conversion.embeds import (
    ZONES_PER_PAGE,
    build_zone_page_embed,
)
from tzcompanion.utils import chunked


class ZonePagesView(discord.ui.View):
    """Previous/next buttons over a long list of timezone matches."""

    def __init__(self, descriptions: list[str], owner_id: int) -> None:
        super().__init__(timeout=300)
        self.pages = chunked(descriptions, ZONES_PER_PAGE) or [[]]
        self.owner_id = owner_id
        self.page = 1
        self._sync_buttons()

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def current_embed(self) -> discord.Embed:
        return build_zone_page_embed(self.pages[self.page - 1], self.page, self.page_count)

    def _sync_buttons(self) -> None:
        self.previous_button.disabled = self.page <= 1
        self.next_button.disabled = self.page >= self.page_count

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if interaction.user.id == self.owner_id:
            return True

        await interaction.response.send_message(
            "Only the person who ran the command can flip pages.",
            ephemeral=True,
        )
        return False

    async def _show_page(self, interaction: discord.Interaction, page: int) -> None:
        self.page = max(1, min(page, self.page_count))
        self._sync_buttons()
        await interaction.response.edit_message(embed=self.current_embed(), view=self)

    @discord.ui.button(label="Previous", style=discord.ButtonStyle.secondary, emoji="◀️")
    async def previous_button(
        self,
        interaction: discord.Interaction,
        button: discord.ui.Button,
    ) -> None:
        await self._show_page(interaction, self.page - 1)

    @discord.ui.button(label="Next", style=discord.ButtonStyle.secondary, emoji="▶️")
    async def next_button(
        self,
        interaction: discord.Interaction,
        button: discord.ui.Button,
    ) -> None:
        await self._show_page(interaction, self.page + 1)
